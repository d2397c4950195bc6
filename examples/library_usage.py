"""Library usage: resolve a config, read a file, and search it without the CLI."""

import os
import sys

from minigrep import Config, case_insensitive_env_unset, read_content, search, search_case_insensitive, search_content
from minigrep.output import print_plain

CONTENT = "Rust\nsafe, fast, productive.\nPic three."

print_plain(search("fast", CONTENT))
print_plain(search_case_insensitive("RuSt", CONTENT))

if len(sys.argv) > 2:
    config = Config.resolve(sys.argv, case_insensitive_env_unset=case_insensitive_env_unset(os.environ)).unwrap()
    for index, line in search_content(config, read_content(config.path).unwrap()):
        print_plain(f"{index}: {line}")
