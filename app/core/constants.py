"""Core constants: storage key prefixes, cache keys and shared literal values."""

# Every attachment list is stored in record meta under this prefix + relation key.
REFERENCE_META_PREFIX = "_ref_"

# Relation keys namespace meta storage; keep them to word characters.
RELATION_KEY_PATTERN = r"[A-Za-z0-9_]+"

# Editor form nonce: hidden field name and the action it is bound to.
NONCE_FIELD = "reference_nonce"
NONCE_ACTION = "references.editor.save"

# Capabilities carried in bearer tokens.
CAPABILITY_MANAGE_OPTIONS = "manage_options"
CAPABILITY_EDIT_POSTS = "edit_posts"

# Cache key prefixes
CACHE_PREFIX_OPTION = "option"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"
