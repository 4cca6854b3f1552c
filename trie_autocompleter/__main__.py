import sys

from trie_autocompleter.cli import main

sys.exit(main())
