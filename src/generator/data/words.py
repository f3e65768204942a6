# Default word pool. Uppercase, de-duplicated, read-only.

WORDS_POOL = (
    "REACT", "TYPESCRIPT", "NODE", "EXPRESS", "VITE",
    "TAILWIND", "DRIZZLE", "POSTGRES", "REPLIT", "CODING",
    "DEBUG", "DEPLOY", "COMPONENT", "HOOK", "STATE",
    "PYTHON", "SERVER", "CLIENT", "ROUTE", "QUERY",
    "SCHEMA", "CACHE", "INDEX", "LAMBDA", "ASYNC",
    "SOCKET", "BUFFER", "STREAM", "PARSER", "TOKEN",
    "COMMIT", "BRANCH", "MERGE", "SCRIPT", "MODULE",
)
