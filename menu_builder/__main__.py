import sys

from menu_builder.cli import main

sys.exit(main())
