import sys

from domain_quotes.app import main

sys.exit(main())
