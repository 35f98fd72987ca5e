"""Allow running as python -m webbynode"""

from .cli.main import main

if __name__ == "__main__":
    main()
