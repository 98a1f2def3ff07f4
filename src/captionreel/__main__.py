import sys

from captionreel.cli import main

sys.exit(main())
