import sys

from passphrase.cli import main

sys.exit(main())
