import sys

from wellness_bot.cli.main import main

sys.exit(main())
