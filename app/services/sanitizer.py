from bs4 import BeautifulSoup, CData, Comment, Declaration, Doctype, ProcessingInstruction

# Markup that survives in notice content; everything else is unwrapped
ALLOWED_TAGS = frozenset({"p", "br", "strong", "em"})

# Tags whose entire subtree should be removed (scripting / embedded / binary)
_REMOVE_TAGS = {
    "script",
    "style",
    "noscript",
    "iframe",
    "object",
    "embed",
    "applet",
    "template",
    "svg",
    "canvas",
}

_MARKUP_NODES = (Comment, CData, Declaration, Doctype, ProcessingInstruction)


def sanitize_content(html: str) -> str:
    """Reduce notice *html* to the ``p``/``br``/``strong``/``em`` allow-list.

    Scripting and embedded elements are dropped together with their content,
    any other tag is unwrapped so its text is kept, and attributes are stripped
    from the tags that remain. This is a filter, not a validator: malformed
    markup is whatever ``html.parser`` makes of it.
    """
    if not html:
        return ""

    # html.parser leaves fragments as-is; lxml would wrap bare text in <p>
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all(_REMOVE_TAGS):
        # Nested matches go with their ancestor
        if not tag.decomposed:
            tag.decompose()

    for node in soup.find_all(string=lambda text: isinstance(text, _MARKUP_NODES)):
        node.extract()

    for tag in soup.find_all(True):
        if tag.name in ALLOWED_TAGS:
            tag.attrs = {}
        else:
            tag.unwrap()

    return str(soup).strip()
