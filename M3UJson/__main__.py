# 19.10.26

import sys

from M3UJson.cli.run import main


if __name__ == "__main__":
    sys.exit(main())
