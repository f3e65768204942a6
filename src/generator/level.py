import random
import string
from typing import Any, Dict, Iterable, List, Optional, Set
from pydantic import BaseModel, ConfigDict, Field

from .data import WORDS_POOL
from .hexgrid import build_grid, hex_neighbors
from .models import Coord, GeneratorConfig, HexCell, Level


ALPHABET = string.ascii_uppercase


class LevelGenerator(BaseModel):
    """
    Builds hex word-search levels.

    Draws candidate words from the pool, places them on a fresh hex grid
    (reusing letters already on the grid where it can), and fills every
    remaining cell with a random letter.

    All grid state is local to a single generate() call, so one generator
    can serve any number of requests.

    Attributes:
        config: Generation settings
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GeneratorConfig = Field(default_factory=GeneratorConfig)
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
        **config_kwargs: Any
    ) -> "LevelGenerator":
        """
        Factory method to create a generator.

        Args:
            config: Optional GeneratorConfig instance
            rng: Optional random source, replaces the seeded default
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new LevelGenerator
        """
        if config is None:
            config = GeneratorConfig(**config_kwargs)

        generator = cls(config=config)
        if rng is not None:
            generator._rng = rng
        return generator

    @property
    def pool(self) -> List[str]:
        """The word pool with duplicates removed, in source order."""
        words = self.config.word_pool if self.config.word_pool is not None else WORDS_POOL
        return list(dict.fromkeys(words))

    def select_candidates(self) -> List[str]:
        """
        Draw a random sample of candidate words, longest first.

        Longer words get first claim on the grid since they are the hardest
        to fit once it fills up.
        """
        pool = self.pool
        candidates = self._rng.sample(pool, min(self.config.candidate_count, len(pool)))
        candidates.sort(key=len, reverse=True)
        return candidates

    def _next_cells(
        self,
        grid: Dict[Coord, HexCell],
        coord: Coord,
        letter: str,
        used: Set[Coord]
    ) -> List[Coord]:
        """Eligible neighbors for the next letter. Cells already holding it win over empty ones."""
        overlaps: List[Coord] = []
        empties: List[Coord] = []
        for neighbor in hex_neighbors(*coord):
            cell = grid.get(neighbor)
            if cell is None or neighbor in used:
                continue
            if cell.letter == letter:
                overlaps.append(neighbor)
            elif not cell.letter:
                empties.append(neighbor)
        return overlaps or empties

    def _grow(
        self,
        grid: Dict[Coord, HexCell],
        start: Coord,
        letters: Iterable[str],
        used: Set[Coord]
    ) -> Optional[List[Coord]]:
        """
        Walk from `start`, one cell per letter.

        Cells taken are added to `used`. Returns the cells visited (excluding
        `start`), or None as soon as a step has nowhere to go.
        """
        path: List[Coord] = []
        current = start
        for letter in letters:
            options = self._next_cells(grid, current, letter, used)
            if not options:
                return None
            current = self._rng.choice(options)
            used.add(current)
            path.append(current)
        return path

    def _place_with_overlap(self, grid: Dict[Coord, HexCell], word: str) -> Optional[List[Coord]]:
        """Anchor the word on a cell that already holds one of its letters."""
        attempts = 0
        for i, letter in enumerate(word):
            anchors = [coord for coord, cell in grid.items() if cell.letter == letter]
            self._rng.shuffle(anchors)

            for anchor in anchors:
                if attempts >= self.config.overlap_attempts:
                    return None
                attempts += 1

                used = {anchor}
                backward = self._grow(grid, anchor, reversed(word[:i]), used)
                if backward is None:
                    continue
                forward = self._grow(grid, anchor, word[i + 1:], used)
                if forward is None:
                    continue

                return list(reversed(backward)) + [anchor] + forward
        return None

    def _place_fresh(self, grid: Dict[Coord, HexCell], word: str) -> Optional[List[Coord]]:
        """Start the word on a random compatible cell and grow it forward."""
        starts = [coord for coord, cell in grid.items() if cell.letter in ("", word[0])]
        if not starts:
            return None

        for _ in range(self.config.fresh_attempts):
            start = self._rng.choice(starts)
            forward = self._grow(grid, start, word[1:], {start})
            if forward is not None:
                return [start] + forward
        return None

    def place_word(self, grid: Dict[Coord, HexCell], word: str) -> Optional[List[Coord]]:
        """
        Try to place a word on the grid.

        Overlap placement is tried first, then fresh placement. On success
        the path is committed to the grid.

        Args:
            grid: The grid being built (modified in place on success)
            word: Uppercase word to place

        Returns:
            The committed path in word order, or None if the word was dropped
        """
        if not word or len(word) > len(grid):
            return None

        path = self._place_with_overlap(grid, word)
        if path is None:
            path = self._place_fresh(grid, word)
        if path is None:
            return None

        for coord, letter in zip(path, word):
            grid[coord].letter = letter
        return path

    def fill(self, grid: Dict[Coord, HexCell]) -> int:
        """
        Give every empty cell a random letter.

        Returns:
            Number of cells filled
        """
        filled = 0
        for cell in grid.values():
            if not cell.letter:
                cell.letter = self._rng.choice(ALPHABET)
                filled += 1
        return filled

    def generate(self, verbose: bool = False) -> Level:
        """
        Generate a new level.

        Args:
            verbose: Print placement progress to stdout

        Returns:
            A fully lettered Level with the words that were placed
        """
        grid = build_grid(self.config.radius)
        placed: List[str] = []

        for word in self.select_candidates():
            if len(placed) >= self.config.target_words:
                break

            path = self.place_word(grid, word)
            if path is None:
                if verbose:
                    print(f"  Dropped {word}")
                continue

            placed.append(word)
            if verbose:
                print(f"  Placed {word} at {path}")

        filled = self.fill(grid)
        if verbose:
            print(f"Placed {len(placed)} words, {filled} filler cells")

        return Level(grid=list(grid.values()), words=placed)


def generate_level(config: Optional[GeneratorConfig] = None, **config_kwargs: Any) -> Level:
    """Generate a single level with a fresh generator."""
    return LevelGenerator.create(config=config, **config_kwargs).generate()
