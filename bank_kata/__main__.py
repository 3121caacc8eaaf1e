"""Run the bank kata API server: python -m bank_kata"""

from .api import run_server


if __name__ == "__main__":
    run_server()
