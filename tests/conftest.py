import os
import sys

# Ensure the `src/` directory is on sys.path so we can import `hybrid_reasoner` package
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# The service under test uses the built-in corpus and no API key
os.environ["CORPUS_PATH"] = ""
os.environ["API_KEY"] = ""
