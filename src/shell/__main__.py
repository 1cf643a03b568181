import sys

from src.shell.main import main

sys.exit(main())
