"""
Production server runner for the movie manager API.

Applies the database migrations, then runs Uvicorn with multiple workers.
"""
import multiprocessing
import os
import subprocess
import sys

import uvicorn

# Formula: (2 x $num_cores) + 1, kept between 2 and 8
CPU_COUNT = multiprocessing.cpu_count()
DEFAULT_WORKERS = min(max(2 * CPU_COUNT + 1, 2), 8)

# Configuration from environment variables
WORKERS = int(os.getenv('UVICORN_WORKERS', DEFAULT_WORKERS))
HOST = os.getenv('API_HOST', '0.0.0.0')
PORT = int(os.getenv('API_PORT', '5000'))
RELOAD = os.getenv('RELOAD', 'false').lower() == 'true'
TIMEOUT_KEEP_ALIVE = int(os.getenv('TIMEOUT_KEEP_ALIVE', '5'))

if __name__ == "__main__":
    print("📦 Running database migrations...")
    try:
        # sys.executable so the migrations run with the interpreter of the venv/container
        subprocess.run([sys.executable, "-m", "alembic", "upgrade", "head"], check=True)
        print("✅ Database migrations applied successfully\n")
    except subprocess.CalledProcessError as e:
        print(f"❌ Error applying database migrations: {e}")
        sys.exit(1)

    print(f"""
🎬 Movie Manager API - Production Mode

📊 Configuration:
  • Workers: {WORKERS} (CPU cores: {CPU_COUNT})
  • Host: {HOST}
  • Port: {PORT}
  • Keep-alive timeout: {TIMEOUT_KEEP_ALIVE}s

Starting server...
""")

    uvicorn.run(
        "main:create_fastapi_app",
        factory=True,
        host=HOST,
        port=PORT,
        workers=WORKERS,
        reload=RELOAD,
        timeout_keep_alive=TIMEOUT_KEEP_ALIVE,
        log_level="info",
        access_log=True,
    )
