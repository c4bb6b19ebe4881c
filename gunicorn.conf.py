import os
import sys

# Add src directory to Python path so 'hybrid_reasoner' package can be found
sys.path.append(os.path.join(os.getcwd(), 'src'))

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# The engine is read-only after startup, so threads share one instance safely.
workers = int(os.environ.get('GUNICORN_WORKERS', '1'))
threads = int(os.environ.get('GUNICORN_THREADS', '4'))
worker_class = "gthread"
worker_tmp_dir = "/dev/shm"

# Each worker builds its own engine from the corpus at import time.
preload_app = False
accesslog = "-"
errorlog = "-"
loglevel = "info"
timeout = 30
