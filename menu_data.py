"""Static menu catalogue for the Bella Biladi pizzeria site.

Prices are stored in euro cents. The catalogue is loaded once at import and
never changes for the lifetime of the process.
"""
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class MenuItem:
    name: str
    description: str
    price_cents: int
    category: str
    image_url: str

    def __post_init__(self):
        if self.price_cents < 0:
            raise ValueError(f"price_cents must be >= 0 for {self.name!r}")


DRINKS_CATEGORY = "drinks"

MENU_ITEMS: Tuple[MenuItem, ...] = (
    # ---------- BELIEBTE ----------
    MenuItem(
        name="Beliebte Pizzabrötchen mit Käse",
        description="8 Stück mit Dip zur Wahl: vegane Mayo, BBQ, Knoblauch, Kräuter oder Sweet-Chili.",
        price_cents=1000,
        category="Popular",
        image_url="/pizzabroetchen.jpeg",
    ),
    MenuItem(
        name="Veggie-BBQ-Pizza",
        description="BBQ-Sauce, Veggie-Pulled, Brokkoli, Cherrytomaten und rote Zwiebeln.",
        price_cents=1000,
        category="Popular",
        image_url="/veggie-bbq.jpeg",
    ),
    MenuItem(
        name="Pizza Caprese",
        description="Frische Tomaten, Mozzarella und Basilikum.",
        price_cents=900,
        category="Popular",
        image_url="/caprese.jpeg",
    ),
    MenuItem(
        name="Pizza Hot Biladi",
        description="Rindersalami, rote Zwiebeln und frische Chili.",
        price_cents=1000,
        category="Popular",
        image_url="/hot-biladi.jpeg",
    ),
    MenuItem(
        name="Pizza Di Casa",
        description="Sauce Hollandaise, Puten-Schinken und Brokkoli.",
        price_cents=900,
        category="Popular",
        image_url="/di-casa.jpeg",
    ),
    # ---------- PIZZA ----------
    MenuItem(
        name="Pizza Margherita",
        description="Klassische Tomatensauce und Käse.",
        price_cents=600,
        category="Pizza",
        image_url="/margherita.jpeg",
    ),
    MenuItem(
        name="Pizza Funghi",
        description="Tomatensauce, Käsemix und Champignons.",
        price_cents=700,
        category="Pizza",
        image_url="/funghi.jpeg",
    ),
    MenuItem(
        name="Pizza Cippola",
        description="Tomatensauce, Käse und Zwiebeln.",
        price_cents=700,
        category="Pizza",
        image_url="/capricciosa.jpeg",
    ),
    MenuItem(
        name="Pizza Brokkoli",
        description="Sauce Hollandaise und Brokkoli.",
        price_cents=700,
        category="Pizza",
        image_url="/brokkoli.jpeg",
    ),
    MenuItem(
        name="Pizza Zaytouna",
        description="Mit frischen Oliven.",
        price_cents=700,
        category="Pizza",
        image_url="/main.jpeg",
    ),
    MenuItem(
        name="Pizza Artischocke",
        description="Mit frischen Artischocken.",
        price_cents=700,
        category="Pizza",
        image_url="/artischoken.jpeg",
    ),
    MenuItem(
        name="Pizza Vier Jahreszeiten",
        description="Champignons, Oliven und Artischocken – der vegetarische Klassiker.",
        price_cents=900,
        category="Pizza",
        image_url="/4 - stagioni.jpeg",
    ),
    MenuItem(
        name="Pizza Mozza",
        description="Tomatensauce, Basilikum und Mozzarella.",
        price_cents=750,
        category="Pizza",
        image_url="/mozza.jpeg",
    ),
    MenuItem(
        name="Pizza Veggie Pulled",
        description="Belegt mit würzigem Veggie-Pulled-Gemüse.",
        price_cents=750,
        category="Pizza",
        image_url="/Veggie pulled.jpeg",
    ),
    MenuItem(
        name="Pizza Veganita",
        description="Frische Tomaten, Spinat und Oliven.",
        price_cents=900,
        category="Pizza",
        image_url="/main.jpeg",
    ),
    MenuItem(
        name="Pizza Melanzane",
        description="Paprika, Auberginen und Cherrytomaten.",
        price_cents=900,
        category="Pizza",
        image_url="/melanzane.jpeg",
    ),
    MenuItem(
        name="Pizza Deluxe",
        description="Frische Tomaten, Brokkoli, Champignons und Auberginen.",
        price_cents=900,
        category="Pizza",
        image_url="/main.jpeg",
    ),
    MenuItem(
        name="Pizza Veggie Lovers",
        description="Veggie-Pulled, Paprika und Mais.",
        price_cents=1000,
        category="Pizza",
        image_url="/veggie-bbq.jpeg",
    ),
    MenuItem(
        name="Pizza Happy Garden",
        description="Brokkoli, Spinat, Paprika, Oliven und Cherrytomaten.",
        price_cents=1000,
        category="Pizza",
        image_url="/happy garden.jpeg",
    ),
    MenuItem(
        name="Pizza Sei Formaggi",
        description="Mit Brie, Gorgonzola und Mozzarella.",
        price_cents=1000,
        category="Pizza",
        image_url="/6 - formaggi.jpeg",
    ),
    MenuItem(
        name="Calzone Veggie",
        description="Veggie-Pulled, Champignons und Spinat.",
        price_cents=1200,
        category="Pizza",
        image_url="/calzone.jpeg",
    ),
    MenuItem(
        name="Calzone Gorgonzola",
        description="Champignons, Gorgonzola und Artischocken als Calzone.",
        price_cents=1200,
        category="Pizza",
        image_url="/main.jpeg",
    ),
    MenuItem(
        name="Pizza Salami",
        description="Tomatensauce, Käse und Rindersalami.",
        price_cents=750,
        category="Pizza",
        image_url="/salami.jpeg",
    ),
    MenuItem(
        name="Pizza Prosciutto",
        description="Tomatensauce, Käse und Puten-Schinken.",
        price_cents=750,
        category="Pizza",
        image_url="/prosciutto.jpeg",
    ),
    MenuItem(
        name="Pizza Prosciutto e Funghi",
        description="Tomatensauce, Käsemix, frische Champignons und zarter Puten-Schinken.",
        price_cents=900,
        category="Pizza",
        image_url="/prosciutto e funghi.jpeg",
    ),
    MenuItem(
        name="Pizza Bolognese",
        description="Tomatensauce, Käse und Rinderhack.",
        price_cents=750,
        category="Pizza",
        image_url="/bolognaise.jpeg",
    ),
    MenuItem(
        name="Pizza Pollo",
        description="Sauce Hollandaise, Käse und Hähnchenbrust.",
        price_cents=750,
        category="Pizza",
        image_url="/pollo.jpeg",
    ),
    MenuItem(
        name="Pizza Hawaii",
        description="Ananas und Puten-Schinken.",
        price_cents=900,
        category="Pizza",
        image_url="/main.jpeg",
    ),
    MenuItem(
        name="Pizza Salami e Funghi",
        description="Champignons und Rindersalami.",
        price_cents=900,
        category="Pizza",
        image_url="/salami et funghi.jpeg",
    ),
    MenuItem(
        name="Pizza Napoli",
        description="Sardellen, Kapern und Oliven.",
        price_cents=1000,
        category="Pizza",
        image_url="/napoli.jpeg",
    ),
    MenuItem(
        name="Pizza Biladi",
        description="Hähnchenbrust, Brokkoli und Mais.",
        price_cents=1000,
        category="Pizza",
        image_url="/biladi.jpeg",
    ),
    MenuItem(
        name="Pizza Bella Biladi",
        description="Rinderhack, rote Zwiebeln und frische Tomaten.",
        price_cents=1000,
        category="Pizza",
        image_url="/bella-biladi.jpeg",
    ),
    MenuItem(
        name="Pizza Sucuk",
        description="Sucuk und Paprika.",
        price_cents=1000,
        category="Pizza",
        image_url="/sucuk.jpeg",
    ),
    MenuItem(
        name="Pizza Le Gamila",
        description="Rinderhack, Paprika und Artischocken.",
        price_cents=1000,
        category="Pizza",
        image_url="/main.jpeg",
    ),
    MenuItem(
        name="Pizza Capricciosa",
        description="Puten-Schinken, Champignons, Oliven und Artischocken.",
        price_cents=1100,
        category="Pizza",
        image_url="/capricciosa.jpeg",
    ),
    MenuItem(
        name="Pizza Metzger",
        description="Rindersalami, Puten-Schinken und Rinderhack.",
        price_cents=1100,
        category="Pizza",
        image_url="/metzger.jpeg",
    ),
    MenuItem(
        name="Pizza Salami Supreme",
        description="Extra Käse und doppelte Rindersalami.",
        price_cents=1100,
        category="Pizza",
        image_url="/main.jpeg",
    ),
    MenuItem(
        name="Pizza BBQ",
        description="BBQ-Sauce, Rindersalami, Sucuk und Aubergine.",
        price_cents=1100,
        category="Pizza",
        image_url="/BBQ.jpeg",
    ),
    MenuItem(
        name="Calzone Klassisch",
        description="Champignons und Puten-Schinken.",
        price_cents=1200,
        category="Pizza",
        image_url="/calzone.jpeg",
    ),
    MenuItem(
        name="Calzone Popeye",
        description="Hähnchenbrust, Spinat und frisches Basilikum.",
        price_cents=1200,
        category="Pizza",
        image_url="/calzone.jpeg",
    ),
    # ---------- PIZZABRÖTCHEN ----------
    MenuItem(
        name="Pizzabrötchen ohne Füllung",
        description="8 Stück mit Dip zur Wahl: vegane Mayo, BBQ, Knoblauch, Kräuter oder Sweet-Chili.",
        price_cents=450,
        category="Pizza rolls",
        image_url="/pizzabroetchen.jpeg",
    ),
    MenuItem(
        name="Pizzabrötchen mit Käse",
        description="8 Stück mit Dip nach Wahl.",
        price_cents=500,
        category="Pizza rolls",
        image_url="/pizzabroetchen.jpeg",
    ),
    MenuItem(
        name="Pizzabrötchen mit Käse & Rindersalami",
        description="8 Stück mit Dip nach Wahl.",
        price_cents=550,
        category="Pizza rolls",
        image_url="/pizzabroetchen.jpeg",
    ),
    MenuItem(
        name="Pizzabrötchen mit Käse & Puten-Schinken",
        description="8 Stück mit Dip nach Wahl.",
        price_cents=550,
        category="Pizza rolls",
        image_url="/pizzabroetchen.jpeg",
    ),
    MenuItem(
        name="Pizzabrötchen mit Käse & Thunfisch",
        description="8 Stück mit Dip nach Wahl.",
        price_cents=550,
        category="Pizza rolls",
        image_url="/pizzabroetchen.jpeg",
    ),
    MenuItem(
        name="Pizzabrötchen mit Käse & Oliven",
        description="8 Stück mit Dip nach Wahl.",
        price_cents=550,
        category="Pizza rolls",
        image_url="/pizzabroetchen.jpeg",
    ),
    MenuItem(
        name="Pizzabrötchen mit Käse & Champignons",
        description="8 Stück mit Dip nach Wahl.",
        price_cents=550,
        category="Pizza rolls",
        image_url="/pizzabroetchen.jpeg",
    ),
    MenuItem(
        name="Pizzabrötchen mit Käse & Spinat",
        description="Auf Wunsch mit veganem Käse. 8 Stück mit Dip nach Wahl.",
        price_cents=550,
        category="Pizza rolls",
        image_url="/pizzabroetchen.jpeg",
    ),
    # ---------- SALATE & ANTIPASTI ----------
    MenuItem(
        name="Bruschetta",
        description="Hausgemachtes Brot mit Tomaten, Zwiebeln und Knoblauch. Vegan.",
        price_cents=600,
        category="Salads",
        image_url="/Bruschetta.jpeg",
    ),
    MenuItem(
        name="Tomaten & Mozzarellascheiben",
        description="Frische Tomaten und Mozzarella mit Basilikum. Veggie.",
        price_cents=700,
        category="Salads",
        image_url="/Tomaten Mozzarella.jpeg",
    ),
    MenuItem(
        name="Antipasti",
        description="Gegrilltes Gemüse, vegan.",
        price_cents=800,
        category="Salads",
        image_url="/Antipasti.jpeg",
    ),
    MenuItem(
        name="Caesar Salad",
        description="Salat, Croutons, Parmesan, Dressing & Hähnchen – auf Wunsch vegan.",
        price_cents=800,
        category="Salads",
        image_url="/caesar-salad.jpg",
    ),
    # ---------- FINGERFOOD ----------
    MenuItem(
        name="Chicken Wings",
        description="6 Stück inklusive Dip.",
        price_cents=750,
        category="Fingerfood",
        image_url="/ChickenWings.jpg",
    ),
    MenuItem(
        name="Chicken Nuggets",
        description="9 Stück inklusive Dip.",
        price_cents=750,
        category="Fingerfood",
        image_url="/Chicken-Nuggets.jpg",
    ),
    MenuItem(
        name="Mozzarella Sticks",
        description="6 Stück inklusive Dip. Veggie.",
        price_cents=650,
        category="Fingerfood",
        image_url="/Mozzarella-Sticks.jpeg",
    ),
    MenuItem(
        name="Snack Box",
        description="3x Wings, 3x Nuggets, 4x Mozzarella Sticks inklusive Dip.",
        price_cents=1000,
        category="Fingerfood",
        image_url="/snack-box.avif",
    ),
    # ---------- SPAGHETTI ----------
    MenuItem(
        name="Spaghetti Napoli",
        description="Tomatensauce, Knoblauch, Basilikum und Olivenöl (vegan).",
        price_cents=800,
        category="Spaghetti",
        image_url="/spaghetti.jpeg",
    ),
    MenuItem(
        name="Spaghetti Aglio e Olio",
        description="Knoblauch, Chili, Olivenöl, Petersilie und Cherrytomaten (vegan).",
        price_cents=800,
        category="Spaghetti",
        image_url="/Spaghetti Aglio e Olio.jpeg",
    ),
    MenuItem(
        name="Spaghetti Bolognese",
        description="Rinderhack, Zwiebeln, Tomatensauce, Knoblauch und Parmesan.",
        price_cents=950,
        category="Spaghetti",
        image_url="/Spaghetti Bolognese.jpeg",
    ),
    MenuItem(
        name="Spaghetti Carbonara",
        description="Sahnesauce, Rinderbacon, Ei, Parmesan und Pfeffer.",
        price_cents=950,
        category="Spaghetti",
        image_url="/spaghetti.jpeg",
    ),
    # ---------- PASTA ÜBERBACKEN ----------
    MenuItem(
        name="Pollo al Forno",
        description="Sahnesauce, Brokkoli, Hähnchenbrust und Pesto.",
        price_cents=950,
        category="Baked Pasta",
        image_url="/Pasta-ueberbacken.jpeg",
    ),
    MenuItem(
        name="Gemüse al Forno",
        description="Sahnesauce, Champignons, Spinat, Cherrytomaten und Pesto.",
        price_cents=950,
        category="Baked Pasta",
        image_url="/Pasta-ueberbacken.jpeg",
    ),
    MenuItem(
        name="Vegaforno",
        description="Vegane Sahnesauce, Spinat, Champignons, Mais und veganer Käse.",
        price_cents=950,
        category="Baked Pasta",
        image_url="/Pasta-ueberbacken.jpeg",
    ),
    MenuItem(
        name="Bolognese al Forno",
        description="Tomatensauce, Parmesan und Rinderhack.",
        price_cents=950,
        category="Baked Pasta",
        image_url="/Pasta-ueberbacken.jpeg",
    ),
    # ---------- BURGER ----------
    MenuItem(
        name="Cheeseburger",
        description="Saftiger Rindfleischburger mit Käse. Kommt mit kleiner Portion Pommes.",
        price_cents=990,
        category="Burger",
        image_url="/burger.jpeg",
    ),
    MenuItem(
        name="Chickenburger",
        description="Knuspriges Hähnchenfilet im Burger. Kommt mit kleiner Portion Pommes.",
        price_cents=990,
        category="Burger",
        image_url="/burger.jpeg",
    ),
    MenuItem(
        name="Vegan Burger",
        description="Pflanzlicher Patty mit frischem Gemüse. Kommt mit kleiner Portion Pommes.",
        price_cents=990,
        category="Burger",
        image_url="/burger.jpeg",
    ),
    # ---------- POMMES FRITES ----------
    MenuItem(
        name="Pommes Frites (kleine Portion)",
        description="Mit Ketchup oder Mayo inklusive.",
        price_cents=400,
        category="French fries",
        image_url="/pommes.jpeg",
    ),
    MenuItem(
        name="Pommes Frites (große Portion)",
        description="Mit Ketchup oder Mayo inklusive.",
        price_cents=600,
        category="French fries",
        image_url="/pommes.jpeg",
    ),
    # ---------- GETRÄNKE ----------
    MenuItem(
        name="Fritz Kola Original",
        description="Die klassische Kola mit 25 mg/100 ml Koffein.",
        price_cents=350,
        category="drinks",
        image_url="/fritz-kola-original.webp",
    ),
    MenuItem(
        name="Fritz Kola Classic Light",
        description="Die leichte Variante mit 25 mg/100 ml Koffein.",
        price_cents=350,
        category="drinks",
        image_url="/fritz-kola-classic-light.webp",
    ),
    MenuItem(
        name="Fritz Kola Super Zero",
        description="Zero Zucker, 25 mg/100 ml Koffein.",
        price_cents=350,
        category="drinks",
        image_url="/fritz-kola-super-zero.webp",
    ),
    MenuItem(
        name="Fritz Limo Zitrone",
        description="Zitronige Limonade mit 7% Fruchtanteil.",
        price_cents=350,
        category="drinks",
        image_url="/fritz-limo-zitrone.webp",
    ),
    MenuItem(
        name="Fritz Limo Honigmelone",
        description="Süße Limonade mit 5% Fruchtanteil.",
        price_cents=350,
        category="drinks",
        image_url="/fritz-limo-honigmelone.webp",
    ),
    MenuItem(
        name="Fritz Limo Orange",
        description="Orangige Limonade mit 17% Fruchtanteil.",
        price_cents=350,
        category="drinks",
        image_url="/fritz-limo-orange.webp",
    ),
    MenuItem(
        name="Fritz Anjola Ananas Limette",
        description="fritz Anjola Ananas Limette Bio.",
        price_cents=350,
        category="drinks",
        image_url="/anjola.png",
    ),
    MenuItem(
        name="Fritz Mischmasch Kola + Orange",
        description="Die perfekte Mischung aus Kola und Orange.",
        price_cents=350,
        category="drinks",
        image_url="/mischmasch.png",
    ),
    MenuItem(
        name="Club Mate",
        description="Erfrischendes Mate-Getränk mit natürlichem Koffein.",
        price_cents=350,
        category="drinks",
        image_url="/club-mate.webp",
    ),
    MenuItem(
        name="Ayran",
        description="Erfrischendes türkisches Joghurtgetränk.",
        price_cents=200,
        category="drinks",
        image_url="/ayran.png",
    ),
    MenuItem(
        name="Fuze Tea Pfirsich",
        description="Schwarzer Tee mit Pfirsichgeschmack.",
        price_cents=350,
        category="drinks",
        image_url="/Fuze_Tea_Pfirsich.png",
    ),
    MenuItem(
        name="Fuze Tea Zitrone",
        description="Schwarzer Tee mit Zitronengeschmack.",
        price_cents=350,
        category="drinks",
        image_url="/Fuze_Tea_Zitrone.png",
    ),
    MenuItem(
        name="Wasser",
        description="Erfrischendes Mineralwasser.",
        price_cents=200,
        category="drinks",
        image_url="/wasser.png",
    ),
    MenuItem(
        name="Sprudelwasser",
        description="Erfrischendes Sprudelwasser.",
        price_cents=200,
        category="drinks",
        image_url="/sprudelwasser.png",
    ),
    # ---------- DESSERTS ----------
    MenuItem(
        name="Tiramisu",
        description="Klassisches italienisches Dessert mit Kaffee und Mascarpone.",
        price_cents=450,
        category="Desserts",
        image_url="/tiramisu.webp",
    ),
    MenuItem(
        name="3 Stk baqlawa",
        description="Süßes Gebäck aus Blätterteig mit Honig und Nüssen.",
        price_cents=400,
        category="Desserts",
        image_url="/Baklava.jpg",
    ),
    MenuItem(
        name="Kuchen",
        description="Hausgemachter Kuchen.",
        price_cents=450,
        category="Desserts",
        image_url="/cake.jpg",
    ),
)

# Display names as shown on the German site
CATEGORY_NAMES: Dict[str, str] = {
    "Popular": "Beliebte",
    "Pizza": "Pizza",
    "Pizza rolls": "Pizzabrötchen",
    "Salads": "Salate & Antipasti",
    "Fingerfood": "Fingerfood",
    "Spaghetti": "Spaghetti",
    "Baked Pasta": "Pasta Überbacken",
    "Burger": "Burger",
    "French fries": "Pommes Frites",
    DRINKS_CATEGORY: "Getränke",
    "Desserts": "Desserts",
}

# Presentation order; a category missing here is not rendered at all.
CATEGORY_ORDER: Tuple[str, ...] = (
    "Popular",
    "Pizza",
    "Pizza rolls",
    "Salads",
    "Fingerfood",
    "Spaghetti",
    "Baked Pasta",
    "Burger",
    "French fries",
    DRINKS_CATEGORY,
    "Desserts",
)
