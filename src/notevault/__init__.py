"""notevault — manage a vault of Markdown notes from an interactive prompt.

Layout of a vault:
    <vault>/
    ├── idea.md          # one note per top-level *.md file
    ├── project.md
    └── .git/            # optional; `push` syncs through it

The vault location is stored in ~/.vaultconfig.json.
"""

__version__ = "0.1.0"
