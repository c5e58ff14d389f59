from __future__ import annotations

# file read when no input path is given on the command line
DEFAULT_INPUT = "superdarn_theses.txt"

# optional cap on the number of records loaded from one input
# None means the record list grows without limit; set an int to turn an
# oversized input into a CapacityExceededError instead of a rendered page
MAX_RECORDS = None

# each record spans exactly this many physical lines:
# author, year, title, advisor, affiliation, degree, url
FIELD_COUNT = 7

# sort order used when --order is not given ("author" or "year")
DEFAULT_ORDER = "author"

# alphabetic navigation bands for the author-first page
# an anchor for a band is placed before the first record whose (upper-cased)
# author initial is at or past the band's first letter
ALPHA_BANDS = ("A-G", "H-N", "O-U", "V-Z")

# degree values that are tallied in the summary line
# matched exactly, so "M.S." or "phd" count only towards the total
DEGREE_MS = "MS"
DEGREE_PHD = "PhD"

# comment markers wrapped around the fragment so it can be spliced into a page
BEGIN_MARKER = "<!-- *** BEGIN THESIS/DISSERTATION CONTENT HERE *** --!>"
END_MARKER = "<!-- *** END THESIS/DISSERTATION CONTENT HERE *** --!>"

# inline styles for the per-record table and the year navigation box
TABLE_STYLE = "border:1px solid black; width:600px;"
YEAR_NAV_STYLE = "width:800px;"

# HTTP request configuration for inputs given as a URL
# Default timeout for HTTP requests (in seconds)
HTTP_TIMEOUT_DEFAULT = 10.0

# Exponential backoff configuration for retries
HTTP_BACKOFF_INITIAL = 0.25  # Initial backoff delay in seconds
HTTP_MAX_RETRIES = 2         # Maximum number of retry attempts

# HTTP status codes that should trigger retries
HTTP_RETRY_STATUS_CODES = (408, 429, 500, 502, 503, 504)
