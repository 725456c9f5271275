"""Demo dataset: five stores and the products they carry.

`seed()` replaces whatever is stored with this dataset by going through the
same commands the API uses, so every product gets its status derived.
"""

from protean.utils.globals import current_domain

from stockroom.product.management import CreateProduct, DeleteProduct
from stockroom.product.product import Product
from stockroom.shared.listing import fetch_all
from stockroom.store.management import CreateStore, DeleteStore
from stockroom.store.store import Store
from stockroom.utils.logging import get_logger

logger = get_logger(__name__)

STORES = [
    ("Kofi Tech Hub", "Oxford St, Osu, Accra", "Kofi Mensah", "active"),
    ("Ama's Furniture & Home", "Ring Rd Central, Accra", "Ama Asante", "active"),
    ("Kantamanto Fashion", "Kantamanto Market, Accra", "Abena Owusu", "active"),
    ("Kwame General Provisions", "Kejetia Market, Kumasi", "Kwame Boateng", "active"),
    ("Adwoa's Corner Shop", "Labone, Accra", "Adwoa Darko", "inactive"),
]

# (name, sku, category, price, quantity, min_stock, index into STORES)
PRODUCTS = [
    ('MacBook Pro 16"', "MBP16-2024", "electronics", 2499.99, 15, 5, 0),
    ("iPhone 15 Pro", "IPH15PRO", "electronics", 999.99, 42, 10, 0),
    ("AirPods Pro (2nd gen)", "APP2-BLK", "electronics", 249.99, 3, 15, 0),
    ("iPad Air 5", "IPAD-AIR5", "electronics", 599.99, 0, 8, 0),
    ("Apple Watch Ultra 2", "AWU2", "electronics", 799.99, 28, 10, 0),
    ("USB-C Hub 7-in-1", "USBC-HUB7", "electronics", 49.99, 100, 20, 0),
    ("Magic Keyboard (Touch ID)", "MK-TOUCHID", "electronics", 199.99, 8, 10, 0),
    ("DisplayPort Cable 2m", "DP-2M", "electronics", 19.99, 74, 25, 0),
    ("Mesh Office Chair", "OFC-CHAIR-01", "furniture", 379.00, 4, 3, 0),
    ("Standing Desk 140cm", "DESK-SIT-STAND-140", "furniture", 699.99, 12, 5, 1),
    ("Ergonomic Chair Pro", "CHR-ERG-PRO", "furniture", 449.99, 0, 8, 1),
    ("Bookshelf (Oak, 5 shelf)", "BSHELF-OAK5", "furniture", 299.99, 25, 10, 1),
    ("Cordless Drill 18V", "DRILL-18V-BOSH", "tools", 129.99, 35, 10, 1),
    ('Circular Saw 7.25"', "SAW-CIRC-725", "tools", 199.99, 4, 5, 1),
    ("Metric Wrench Set (8pc)", "WR-8PC-MET", "tools", 79.99, 50, 15, 1),
    ("Denim Jacket (M)", "JKT-DNM-M", "clothing", 89.99, 60, 20, 2),
    ("Running Shoes - Size 42", "SHOE-RUN-42", "clothing", 129.99, 2, 15, 2),
    ("Cotton T-Shirt 3-Pack (L)", "TEE-3PK-L", "clothing", 34.99, 200, 50, 2),
    ("Winter Parka (XL)", "PRKA-XL-NVY", "clothing", 259.99, 0, 10, 2),
    ("Silk Scarf (Floral)", "SCARF-SILK-FLR", "clothing", 49.99, 45, 20, 2),
    ('Leather Belt 32"', "BLT-LTR-32", "clothing", 39.99, 80, 25, 2),
    ("Merino Wool Sweater (S)", "SWR-MRN-S", "clothing", 79.99, 13, 15, 2),
    ("Snap-back Cap", "CAP-SNAP-BLK", "clothing", 24.99, 37, 10, 2),
    ("Organic Coffee Beans 1kg", "COF-ORG-1KG", "food", 18.99, 150, 30, 3),
    ("Extra Virgin Olive Oil 500ml", "OIL-EVO-500", "food", 12.99, 5, 20, 3),
    ("Dark Chocolate Assortment", "CHOC-DRK-AST", "food", 24.99, 75, 25, 3),
    ("Whey Protein Bars (24pk)", "PBAR-WHY-24", "food", 29.99, 0, 15, 3),
    ("Sencha Green Tea (40 bags)", "TEA-GRN-40", "food", 14.99, 90, 20, 3),
    ("JBL Clip 4 Speaker", "JBL-CLIP4-RED", "electronics", 79.99, 22, 10, 3),
    ("Anker 20000mAh Powerbank", "ANKR-PB-20K", "electronics", 49.99, 9, 10, 3),
    ("Vintage Table Lamp", "LAMP-VTG-BRS", "furniture", 149.99, 3, 5, 4),
    ("Canvas Backpack 30L", "BAG-CNV-30L", "clothing", 54.99, 11, 10, 4),
    ("Mixed Dried Fruit 500g", "FRUIT-DRY-500", "food", 9.99, 0, 10, 4),
    ("Soy Pillar Candles (set of 4)", "CNDL-SOY-4PK", "other", 22.99, 30, 15, 4),
    ("A5 Notebook 3-Pack", "NB-A5-3PK", "other", 15.99, 12, 10, 4),
]


def clear():
    """Delete every store (and with it, its products) plus any stray products."""
    for store in fetch_all(current_domain.repository_for(Store)._dao.query):
        current_domain.process(DeleteStore(store_id=str(store.id)), asynchronous=False)
    for product in fetch_all(current_domain.repository_for(Product)._dao.query):
        current_domain.process(DeleteProduct(product_id=str(product.id)), asynchronous=False)


def seed() -> tuple[int, int]:
    """Replace all data with the demo dataset. Must run inside a domain context."""
    clear()

    store_ids = [
        current_domain.process(
            CreateStore(name=name, location=location, manager=manager, status=status),
            asynchronous=False,
        )
        for name, location, manager, status in STORES
    ]

    for name, sku, category, price, quantity, min_stock, store_index in PRODUCTS:
        current_domain.process(
            CreateProduct(
                name=name,
                sku=sku,
                category=category,
                price=price,
                quantity=quantity,
                min_stock=min_stock,
                store_id=store_ids[store_index],
            ),
            asynchronous=False,
        )

    logger.info("Seeded demo data", stores=len(STORES), products=len(PRODUCTS))
    return len(STORES), len(PRODUCTS)
