# python -m trie_spellchecker
import sys

from trie_spellchecker.cli.cli import main

sys.exit(main())
