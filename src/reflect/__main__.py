"""Run the API with ``python -m reflect``."""

# Load .env file before importing anything else
from dotenv import load_dotenv
load_dotenv()

from reflect.main import main

if __name__ == "__main__":
    main()
