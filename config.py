# embedded, in-memory; nothing survives the process
DATABASE_URL = "sqlite://"

# read relative to the working directory
BOOKS_JSON_PATH = "books.json"

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
