"""Application settings read from the environment (and an optional .env file)."""
import os

from dotenv import load_dotenv

load_dotenv()

# Database
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///./movie_manager.db')
DB_ECHO = os.getenv('DB_ECHO', 'false').lower() == 'true'

# Classic movie rule: movies released up to this year may not exceed the max duration
CLASSIC_MOVIE_UNTIL_YEAR = int(os.getenv('CLASSIC_MOVIE_UNTIL_YEAR', '1960'))
CLASSIC_MOVIE_MAX_DURATION = int(os.getenv('CLASSIC_MOVIE_MAX_DURATION', '120'))

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Console client
API_BASE_URL = os.getenv('API_BASE_URL', 'http://localhost:5000')
API_TIMEOUT = float(os.getenv('API_TIMEOUT', '10'))
