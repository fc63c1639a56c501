# Shared timing constants for the browsing client.

# Drawer open/close transition. The close delay and the presentation layer both read this
# value; it must match the CSS transition of the detail drawer.
DRAWER_TRANSITION_MS = 300

# Quiet period before a typed search term drives list queries
SEARCH_DEBOUNCE_MS = 500

# Query cache freshness windows (seconds)
PRODUCTS_STALE_TIME = 5 * 60
PRODUCT_STALE_TIME = 60

# Attempts after the first failure
PRODUCTS_RETRY = 2
PRODUCT_RETRY = 3

# Unused query entries are dropped after this long (seconds), or least recently used first past the size bound
QUERY_GC_TIME = 10 * 60
QUERY_CACHE_MAXSIZE = 256
