"""Common literal values used across collection_hooks.

These constants keep sidebar keys, element ids, Book special page commands and
query parameter names centralized so the renderers, templates, and tests can
import the same values without drifting. Intended for internal use within the
collection_hooks package.

Examples
--------
>>> from collection_hooks import _constants
>>> _constants.DOWNLOAD_ID_TEMPLATE.format(writer="rl")
'coll-download-as-rl'
>>> _constants.PORTLET_SECTION
'coll-print_export'
"""

NS_SPECIAL = -1
NS_MAIN = 0
NS_CATEGORY = 14

NAMESPACE_NAMES: dict[int, str] = {
    -1: "Special",
    0: "",
    1: "Talk",
    2: "User",
    3: "User talk",
    4: "Project",
    5: "Project talk",
    6: "File",
    7: "File talk",
    8: "MediaWiki",
    9: "MediaWiki talk",
    10: "Template",
    11: "Template talk",
    12: "Help",
    13: "Help talk",
    14: "Category",
    15: "Category talk",
}

BOOK_SPECIAL_PAGE = "Book"
SESSION_KEY = "wsCollection"

PORTLET_SECTION = "coll-print_export"
TOOLBOX_SECTION = "TOOLBOX"
TOOLBOX_PRINT_KEY = "print"
LAST_MODIFIED_KEY = "collection"

VISIBLE_ACTIONS = frozenset({"view", "purge"})

# Book special page commands (``bookcmd`` values).
CMD_START = "book_creator"
CMD_STOP = "stop_book_creator"
CMD_RENDER = "render_article"
CMD_ADD_ARTICLE = "add_article"
CMD_REMOVE_ARTICLE = "remove_article"
CMD_ADD_CATEGORY = "add_category"
CMD_SUGGEST = "suggest"

# Query parameter names understood by the Book special page.
PARAM_COMMAND = "bookcmd"
PARAM_REFERER = "referer"
PARAM_ARTICLE_TITLE = "arttitle"
PARAM_RETURN_TO = "returnto"
PARAM_OLDID = "oldid"
PARAM_WRITER = "writer"
PARAM_CATEGORY_TITLE = "cattitle"

CREATE_BOOK_ID = "coll-create_a_book"
DISABLE_ID = "coll-book_creator_disable"
DOWNLOAD_ID_TEMPLATE = "coll-download-as-{writer}"
PRINT_ID = "t-print"

SCRIPT_MODULE = "ext.collection.bookcreator"
STYLE_MODULE = "ext.collection.bookcreator.styles"
IMAGE_SUBPATH = "Collection/images"
