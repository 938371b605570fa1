import os
import sys
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///labportal.db")

if not DATABASE_URL.startswith("sqlite:///"):
    print("Error: DATABASE_URL is not a SQLite database; drop the tables with your database tooling instead.")
    sys.exit(1)

# Relative SQLite paths resolve against the current working directory
db_file_path = os.path.abspath(DATABASE_URL.split("///", 1)[1])

if os.path.exists(db_file_path):
    try:
        os.remove(db_file_path)
        print(f"Successfully deleted database file: {db_file_path}")
    except OSError as e:
        print(f"Error deleting file {db_file_path}: {e}")
        sys.exit(1)
else:
    print(f"Database file not found at {db_file_path}. Nothing to delete.")

print("All collections (students, teachers, assignments, submissions) have been reset.")
