from BakeryOPS.core.config import Paths, configure_logging
from BakeryOPS.core.reports import available_months, build_report, customer_directory
from BakeryOPS.core.storage import JsonFileStore
from BakeryOPS.data import get_DEMO_BAKERY
from BakeryOPS.rules.pricing import product_pricing, quote_recipe_batch
from BakeryOPS.ui.results_view import (
    render_bundle,
    render_customers,
    render_quote,
    render_report,
)


def run():
    log = configure_logging()
    store = JsonFileStore(Paths().DATA_FILE)
    data = store.load()
    if not data.recipes:
        log.info("empty document, loading the demo bakery")
        data = get_DEMO_BAKERY()
        store.save(data)

    # Calculateur : 6 unités de la première recette, boîte standard, +100 %
    recipe = data.recipes[0]
    quote = quote_recipe_batch(
        recipe,
        data.ingredients,
        quantity=6,
        profit_percent=100,
        packaging=data.packagings[0] if data.packagings else None,
        settings=data.settings,
    )
    print(render_quote(recipe.name, quote))
    print()

    for product in data.products:
        print(render_bundle(product.name, product_pricing(product, data.recipes, data.ingredients)))
    print()

    months = available_months(data.orders)
    print(render_report(build_report(data.orders, data.products)))
    print(f"Mois disponibles : {', '.join(months)}")
    print()
    print(render_customers(customer_directory(data.orders)))


if __name__ == "__main__":
    run()
