"""Common literal values used across pageforge.

These constants keep placeholder tokens, file names, and directory names
centralized so the generator, the project checks, and tests can import the
same values without drifting.

Examples
--------
>>> from pageforge import _constants
>>> _constants.CONTENT_PLACEHOLDER
'{{CONTENT}}'
>>> _constants.SITE_CONFIG_FILENAME
'site.json'
"""

FRONT_MATTER_DELIMITER = "---"

PAGE_TITLE_PLACEHOLDER = "{{PAGE-TITLE}}"
PAGE_SUBTITLE_PLACEHOLDER = "{{PAGE-SUBTITLE}}"
CONTENT_PLACEHOLDER = "{{CONTENT}}"
SITE_TITLE_PLACEHOLDER = "{{SITE-TITLE}}"
NAV_ELEMENTS_PLACEHOLDER = "{{NAV-ELEMENTS}}"

SITE_CONFIG_FILENAME = "site.json"
PAGES_DIRNAME = "pages"
OUTPUT_DIRNAME = "out"
THEMES_DIRNAME = "themes"
INDEX_PAGE = "index.md"

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"

DEFAULT_THEME = "default"
NAV_ACTIVE_CLASS = "nav-active"
