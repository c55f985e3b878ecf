"""
Turns a validated Menu into one self-contained HTML page.

The page carries its own stylesheet; the only remote asset is the header icon.
Menu text is inserted as written in the source file.
"""
from string import Template
from textwrap import dedent

from menu_builder.models import Item, Menu, Section, format_price

ICON_URL = (
    "https://upload.wikimedia.org/wikipedia/commons/thumb/3/37/"
    "Cib-coffeescript_%28CoreUI_Icons_v1.0.0%29.svg/"
    "250px-Cib-coffeescript_%28CoreUI_Icons_v1.0.0%29.svg.png"
)
ICON_ALT = "Coffee mug icon"

STYLE = dedent("""\
    :root {
      --ink: #1f1f1f;
      --panel: #e9ecf2;
      --panel-border: #c6c9d1;
      --accent: #c2453a;
      --header-bg: #111111;
      --header-text: #f5f5f5;
    }

    * {
      box-sizing: border-box;
    }

    body {
      margin: 0;
      font-family: "Helvetica Neue", "Arial", sans-serif;
      color: var(--ink);
      background: #d9dde5;
    }

    .page {
      max-width: 980px;
      margin: 0 auto;
      padding: 24px 16px 40px;
    }

    .header {
      display: flex;
      align-items: center;
      justify-content: center;
      gap: 12px;
      background: var(--header-bg);
      color: var(--header-text);
      padding: 16px;
      font-size: 34px;
      letter-spacing: 3px;
      font-weight: 700;
    }

    .header-icon {
      width: 44px;
      height: 44px;
      filter: invert(1);
    }

    .menu-grid {
      margin-top: 18px;
      display: grid;
      gap: 18px;
    }

    .menu-section {
      background: var(--panel);
      border: 2px solid var(--panel-border);
      padding: 14px 14px 8px;
    }

    .section-title {
      color: var(--accent);
      font-weight: 700;
      letter-spacing: 1px;
      font-size: 14px;
      margin-bottom: 8px;
    }

    .menu-item {
      padding: 6px 0;
      border-top: 1px solid #b9bcc6;
    }

    .menu-item:first-child {
      border-top: 0;
    }

    .item-header {
      display: flex;
      justify-content: space-between;
      gap: 12px;
      font-weight: 700;
      font-size: 15px;
    }

    .item-description {
      margin-top: 2px;
      font-size: 13px;
      color: #444;
    }

    @media (min-width: 768px) {
      .menu-grid {
        grid-template-columns: 1fr 1fr;
      }
    }
""")


def _indent(text: str, width: int) -> str:
    pad = " " * width
    return "".join(pad + line if line.strip() else line for line in text.splitlines(True))


# Indentation is applied to the template text before substitution, so menu
# values land in the page exactly as written.
ITEM_TEMPLATE = Template(_indent(dedent("""
    <div class="menu-item">
      <div class="item-header">
        <div class="item-name">${name}</div>
        <div class="item-price">${price}</div>
      </div>${description}
    </div>"""), 12))

DESCRIPTION_TEMPLATE = Template("\n" + " " * 14 + '<div class="item-description">${description}</div>')

SECTION_TEMPLATE = Template(_indent(dedent("""
    <section class="menu-section">
      <div class="section-title">${label}</div>
      <div class="section-items">${items}
      </div>
    </section>"""), 8))

PAGE_TEMPLATE = Template(dedent("""\
    <!DOCTYPE html>
    <html lang="en">
      <head>
        <meta charset="UTF-8" />
        <meta name="viewport" content="width=device-width, initial-scale=1" />
        <title>${title}</title>
        <style>
    ${style}    </style>
      </head>
      <body>
        <div class="header">
          <img class="header-icon" src="${icon_url}" alt="${icon_alt}" />
          ${title}
        </div>
        <div class="page">
          <main class="menu-grid">${sections}
          </main>
        </div>
      </body>
    </html>
"""))


def render_item(item: Item) -> str:
    description = ""
    if item.has_description:
        description = DESCRIPTION_TEMPLATE.substitute(description=item.description)
    return ITEM_TEMPLATE.substitute(
        name=item.name,
        price=format_price(item.price),
        description=description,
    )


def render_section(section: Section) -> str:
    return SECTION_TEMPLATE.substitute(
        label=section.name.upper(),
        items="".join(render_item(item) for item in section.items),
    )


def render(menu: Menu) -> str:
    """
    Builds the full HTML document for ``menu``.

    The title is shown upper-cased in both the page <title> and the header bar.
    Sections and their items keep the order of the source file.
    """
    return PAGE_TEMPLATE.substitute(
        title=menu.title.upper(),
        style=_indent(STYLE, 6),
        icon_url=ICON_URL,
        icon_alt=ICON_ALT,
        sections="".join(render_section(section) for section in menu.sections),
    )
