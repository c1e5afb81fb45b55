"""
Quick start script for local development.
Starts the loan calculator API with uvicorn.
"""
import subprocess
import sys

from loancalc.core.config import settings


def main():
    """Starts the server."""
    print(f"{settings.APP_NAME} v{settings.VERSION}\n")

    print(f"Starting FastAPI server on port {settings.PORT}...")
    print(f"Calculator:    http://localhost:{settings.PORT}/loans/calculate")
    print(f"Documentation: http://localhost:{settings.PORT}/docs")
    print(f"Health check:  http://localhost:{settings.PORT}/health\n")

    command = [
        sys.executable, "-m", "uvicorn", "loancalc.main:app",
        "--host", settings.HOST, "--port", str(settings.PORT)
    ]
    if settings.DEBUG:
        command.append("--reload")

    try:
        subprocess.run(command, check=True)
    except KeyboardInterrupt:
        print("\n\nServer stopped. Goodbye!")
    except subprocess.CalledProcessError as e:
        print(f"\nError starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
