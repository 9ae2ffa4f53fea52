"""Common literal values used across standards_pages.

These constants keep banners, file suffixes, and depth limits centralized so
templates, renderers, and tests can import the same values without drifting.
Intended for internal use within the standards_pages package.

Examples
--------
>>> from standards_pages import _constants
>>> _constants.RULESET_BANNER.format(filename="python-production.toml")
'<!-- Ruleset: python-production.toml -->'
>>> _constants.MAX_HEADING_LEVEL
4
"""

GENERATED_BANNER = "<!-- AUTO-GENERATED — DO NOT EDIT -->"
RULESET_BANNER = "<!-- Ruleset: {filename} -->"
REGENERATE_BANNER = '<!-- Run "{command}" to update -->'

RULESET_SUFFIX = ".toml"
GUIDELINE_SUFFIX = ".md"

SECTION_START_DEPTH = 2
MAX_HEADING_LEVEL = 4
