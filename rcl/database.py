from databases import Database

from rcl.config import config

database = Database(str(config.pg_dsn))
