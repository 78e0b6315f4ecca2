# marginalia/constants.py

# Notes are markdown files, pages are HTML files with the same stem.
SOURCE_SUFFIX = ".md"
OUTPUT_SUFFIX = ".html"

# Fenced blocks with this language tag hold orbit review decks.
ORBIT_LANGUAGE = "orbit"

# Written once per build into the destination root.
STYLESHEET_NAME = "tufte.css"
