import re
import time
import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Tuple, Iterable, Mapping, Sequence, Union

from menu_data import MenuItem, DRINKS_CATEGORY
from interactions import DEFAULT_SLIDE_PERIOD_MS, HEADER_ACTIVE_AT, BACK_TOP_VIEWPORTS

log = logging.getLogger("uvicorn.error")

IMAGE_BASE_DIR = "./assets/images"
FALLBACK_IMAGE = f"{IMAGE_BASE_DIR}/menu-1.jpeg"

# Selectors tried in order when mounting the menu into a page
MENU_CONTAINER_ID = "menu-items-list"
MENU_SECTION_ID = "menu"
MENU_LIST_CLASS = "grid-list"

HERO_SLIDES = [
    {"subtitle": "Tradition & Hygiene", "title": "Pizza aus dem Steinofen", "img": "hero-slider-1.jpg"},
    {"subtitle": "Frisch zubereitet", "title": "Pasta, Salate & Fingerfood", "img": "hero-slider-2.jpg"},
    {"subtitle": "Für Ihre Feier", "title": "Catering ab 50 Personen", "img": "hero-slider-3.jpg"},
]


def safe(s: Any) -> str:
    return str(s if s is not None else "").replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;").replace("'", "&#x27;")


def format_price(cents: int) -> str:
    """Format a price in cents as German currency, e.g. 1000 -> '10,00 €'."""
    if cents < 0:
        raise ValueError(f"price must be non-negative, got {cents}")
    euros, rest = divmod(int(cents), 100)
    return f"{euros},{rest:02d} €"


def resolve_image_path(image_url: str, base: str = IMAGE_BASE_DIR) -> str:
    # "/x.jpg" is already rooted under the base, "x.jpg" is a bare filename
    base = base.rstrip("/")
    if image_url.startswith("/"):
        return f"{base}{image_url}"
    return f"{base}/{image_url}"


# ────────────────────────────────────────────────────────────────────────────
# Display records
# ────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class CategoryHeader:
    key: str
    title: str
    kind: str = "header"


@dataclass(frozen=True)
class MenuCard:
    name: str
    description: str
    price: str
    image: str
    fallback_image: str
    category: str
    is_drink: bool = False
    kind: str = "item"


MenuEntry = Union[CategoryHeader, MenuCard]


def group_by_category(items: Iterable[MenuItem]) -> Dict[str, List[MenuItem]]:
    """Stable partition of items by category key (source order preserved)."""
    groups: Dict[str, List[MenuItem]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    return groups


def render_menu(
    items: Sequence[MenuItem],
    category_names: Mapping[str, str],
    category_order: Sequence[str],
    *,
    image_base: str = IMAGE_BASE_DIR,
    fallback_image: str = FALLBACK_IMAGE,
    drinks_category: str = DRINKS_CATEGORY,
) -> List[MenuEntry]:
    """Turn the catalogue into an ordered list of display records.

    Only categories named in ``category_order`` are emitted, in that order,
    each preceded by a header carrying its display name. Categories in the
    order without any item produce nothing. Raises ``KeyError`` when an
    emitted category has no display name.
    """
    groups = group_by_category(items)
    entries: List[MenuEntry] = []
    for key in category_order:
        members = groups.get(key)
        if not members:
            continue
        if key not in category_names:
            raise KeyError(f"no display name for menu category {key!r}")
        entries.append(CategoryHeader(key=key, title=category_names[key]))
        for item in members:
            entries.append(MenuCard(
                name=item.name,
                description=item.description,
                price=format_price(item.price_cents),
                image=resolve_image_path(item.image_url, image_base),
                fallback_image=fallback_image,
                category=key,
                is_drink=item.category == drinks_category,
            ))
    return entries


# ────────────────────────────────────────────────────────────────────────────
# HTML adapter
# ────────────────────────────────────────────────────────────────────────────
def _header_html(entry: CategoryHeader) -> str:
    return f"""<li class="menu-category-header" data-category="{safe(entry.key)}">
      <h3 class="title-2 menu-category-title">{safe(entry.title)}</h3>
    </li>"""


def _card_html(entry: MenuCard) -> str:
    card_cls = "menu-card hover:card drink-item" if entry.is_drink else "menu-card hover:card"
    return f"""
        <li>
          <div class="{card_cls}">
            <figure class="card-banner img-holder" style="--width: 100; --height: 100;">
              <img src="{safe(entry.image)}" width="100" height="100" loading="lazy" alt="{safe(entry.name)}" class="img-cover" onerror="this.onerror=null;this.src='{safe(entry.fallback_image)}'">
            </figure>
            <div>
              <div class="title-wrapper">
                <h3 class="title-3">
                  <a href="#menu" class="card-title">{safe(entry.name)}</a>
                </h3>
                <span class="span title-2">{safe(entry.price)}</span>
              </div>
              <p class="card-text label-1">{safe(entry.description)}</p>
            </div>
          </div>
        </li>
      """


def build_menu_html(entries: Iterable[MenuEntry]) -> str:
    return "".join(
        _header_html(e) if isinstance(e, CategoryHeader) else _card_html(e)
        for e in entries
    )


def _open_tag_pat(attr: str, value_pat: str) -> "re.Pattern":
    # attribute must stand alone, so data-id="..." or x-class="..." never match
    return re.compile(rf"<(\w+)\b[^>]*(?<![\w-]){attr}=[\"']{value_pat}[\"'][^>]*>", re.I | re.S)


_SECTION_PAT = _open_tag_pat("id", re.escape(MENU_SECTION_ID))
_LIST_PAT = _open_tag_pat("class", rf"[^\"']*(?<![\w-]){re.escape(MENU_LIST_CLASS)}(?![\w-])[^\"']*")


def _element_span(html: str, open_match) -> Tuple[int, int]:
    """Return (inner_start, inner_end) of the element opened by ``open_match``."""
    tag = open_match.group(1).lower()
    depth = 1
    tag_pat = re.compile(rf"<(/?){tag}\b[^>]*?(/?)>", re.I | re.S)
    pos = open_match.end()
    for m in tag_pat.finditer(html, pos):
        if m.group(2):
            continue
        depth += -1 if m.group(1) else 1
        if depth == 0:
            return open_match.end(), m.start()
    raise ValueError(f"unclosed <{tag}> element")


def mount_menu(page_html: str, menu_html: str, container_id: str = MENU_CONTAINER_ID) -> str:
    """Replace the full contents of the menu container inside ``page_html``.

    Looks for ``#<container_id>`` first, then for the ``grid-list`` list inside
    ``#menu``. When neither exists the page is returned unchanged.
    """
    target = _open_tag_pat("id", re.escape(container_id)).search(page_html)
    if target is None:
        section = _SECTION_PAT.search(page_html)
        if section is not None:
            sec_start, sec_end = _element_span(page_html, section)
            target = _LIST_PAT.search(page_html, sec_start, sec_end)
    if target is None:
        log.debug("menu: no container #%s in page; skipping render", container_id)
        return page_html
    inner_start, inner_end = _element_span(page_html, target)
    return page_html[:inner_start] + menu_html + page_html[inner_end:]


# ────────────────────────────────────────────────────────────────────────────
# Page builder
# ────────────────────────────────────────────────────────────────────────────
def build_page(
    entries: List[MenuEntry],
    *,
    name: str = "Bella Biladi Pizza",
    image_base: str = IMAGE_BASE_DIR,
    slide_period_ms: int = DEFAULT_SLIDE_PERIOD_MS,
    min_party_size: int = 50,
) -> Tuple[str, Dict[str, Any]]:
    """Build the standalone site page and mount the rendered menu once."""
    slides_html = "".join([
        f"""
        <li class="slider-item {'active' if i == 0 else ''}" data-hero-slider-item>
          <div class="slider-bg">
            <img src="{safe(resolve_image_path(s['img'], image_base))}" width="1880" height="950" alt="" class="img-cover">
          </div>
          <p class="label-2 section-subtitle slider-reveal">{safe(s['subtitle'])}</p>
          <h1 class="display-1 hero-title slider-reveal">{safe(s['title'])}</h1>
          <a href="#reservation" class="btn btn-primary slider-reveal"><span class="text text-1">Tisch reservieren</span></a>
        </li>"""
        for i, s in enumerate(HERO_SLIDES)
    ])
    categories = [e.title for e in entries if isinstance(e, CategoryHeader)]
    items_count = sum(1 for e in entries if isinstance(e, MenuCard))

    page = f"""<!DOCTYPE html>
<html lang="de">
<head>
<meta charset="UTF-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<title>{safe(name)}</title>
<link rel="stylesheet" href="./assets/css/style.css"/>
</head>
<body id="top">

  <div class="preload" data-preaload><p class="text">{safe(name)}</p></div>

  <header class="header" data-header>
    <div class="container">
      <a href="#" class="logo">{safe(name)}</a>
      <nav class="navbar" data-navbar>
        <button class="close-btn" aria-label="close menu" data-nav-toggler>&times;</button>
        <ul class="navbar-list">
          <li class="navbar-item"><a href="#home" class="navbar-link">Start</a></li>
          <li class="navbar-item"><a href="#menu" class="navbar-link">Speisekarte</a></li>
          <li class="navbar-item"><a href="#reservation" class="navbar-link">Reservierung</a></li>
        </ul>
      </nav>
      <button class="nav-open-btn" aria-label="open menu" data-nav-toggler>&#9776;</button>
      <div class="overlay" data-nav-toggler data-overlay></div>
    </div>
  </header>

  <main>
    <section class="hero text-center" aria-label="home" id="home">
      <ul class="hero-slider" data-hero-slider>{slides_html}
      </ul>
      <button class="slider-btn prev" aria-label="slide to previous" data-prev-btn>&lsaquo;</button>
      <button class="slider-btn next" aria-label="slide to next" data-next-btn>&rsaquo;</button>
    </section>

    <section class="section menu" aria-label="menu-label" id="menu">
      <div class="container">
        <p class="section-subtitle text-center label-2">Unsere Auswahl</p>
        <h2 class="headline-1 section-title text-center">Speisekarte</h2>
        <ul class="grid-list" id="{MENU_CONTAINER_ID}"></ul>
      </div>
    </section>

    <section class="reservation" id="reservation">
      <div class="container">
        <form class="reservation-form" action="/send-email" method="post">
          <h2 class="headline-1 text-center">Tisch reservieren</h2>
          <p class="form-text text-center">Gruppenreservierungen ab {min_party_size} Personen</p>
          <input type="text" name="name" id="name" placeholder="Ihr Name" autocomplete="off" class="input-field" required>
          <input type="tel" name="phone" id="phone" placeholder="Telefonnummer" autocomplete="off" class="input-field" required>
          <input type="number" name="person" id="person" min="{min_party_size}" value="{min_party_size}" class="input-field" required>
          <input type="date" name="reservationDate" id="startDate" class="input-field" required>
          <input type="time" name="reservationTime" id="reservationTime" class="input-field" required>
          <input type="text" name="address" id="address" placeholder="Adresse" autocomplete="off" class="input-field">
          <textarea name="message" id="message" placeholder="Nachricht" class="input-field"></textarea>
          <button type="submit" class="btn btn-secondary" id="emailButton"><span class="text text-1">Anfrage senden</span></button>
        </form>
      </div>
    </section>
  </main>

  <footer class="footer">
    <div class="container text-center">
      <p class="copyright">&copy; {time.strftime("%Y")} {safe(name)}</p>
    </div>
  </footer>

  <a href="#top" class="back-top-btn" aria-label="back to top" data-back-top-btn>&uarr;</a>

<script>
  (function() {{
    var items = document.querySelectorAll('[data-hero-slider-item]');
    var prev = document.querySelector('[data-prev-btn]');
    var next = document.querySelector('[data-next-btn]');
    var pos = 0, timer = null;
    if (!items.length) return;
    function show(i) {{
      items[pos].classList.remove('active');
      pos = (i + items.length) % items.length;
      items[pos].classList.add('active');
    }}
    function stop() {{ if (timer) {{ clearInterval(timer); timer = null; }} }}
    function start() {{ stop(); timer = setInterval(function() {{ show(pos + 1); }}, {int(slide_period_ms)}); }}
    [prev, next].forEach(function(btn) {{
      if (!btn) return;
      btn.addEventListener('mouseover', stop);
      btn.addEventListener('mouseout', start);
    }});
    if (next) next.addEventListener('click', function() {{ show(pos + 1); }});
    if (prev) prev.addEventListener('click', function() {{ show(pos - 1); }});
    window.addEventListener('load', start);
  }})();
  (function() {{
    var header = document.querySelector('[data-header]');
    var backTop = document.querySelector('[data-back-top-btn]');
    var navbar = document.querySelector('[data-navbar]');
    var overlay = document.querySelector('[data-overlay]');
    var last = 0;
    document.querySelectorAll('[data-nav-toggler]').forEach(function(el) {{
      el.addEventListener('click', function() {{
        if (navbar) navbar.classList.toggle('active');
        if (overlay) overlay.classList.toggle('active');
        document.body.classList.toggle('nav-active');
      }});
    }});
    window.addEventListener('scroll', function() {{
      if (document.body.classList.contains('nav-active')) return;
      var y = window.scrollY;
      var active = y >= {int(HEADER_ACTIVE_AT)};
      if (header) {{
        header.classList.toggle('active', active);
        header.classList.toggle('hide', active && y > last);
      }}
      if (backTop) backTop.classList.toggle('active', y >= window.innerHeight * {BACK_TOP_VIEWPORTS});
      last = y;
    }});
  }})();
</script>

</body>
</html>
"""
    html = mount_menu(page, build_menu_html(entries))
    meta = {
        "name": name,
        "categories": categories,
        "items": items_count,
        "slide_period_ms": slide_period_ms,
    }
    log.info("BUILD PAGE: name=%s categories=%d items=%d", name, len(categories), items_count)
    return html, meta
