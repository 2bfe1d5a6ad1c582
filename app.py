import logging

from flask import Flask, current_app, jsonify, request
from flask_babel import Babel, gettext as _

from config import get_config
from constants import BASE_UNITS, PURCHASE_UNIT_CHOICES, UNIT_FAMILIES, USAGE_UNIT_CHOICES
from models import db
from services import (
    DatabaseStorage,
    IngredientNotFound,
    RecipeNotFound,
    ValidationError,
    Workspace,
    base_unit,
    line_status,
    parse_amount,
    parse_fixed_costs,
    parse_ingredient,
    parse_ingredient_changes,
    parse_product_name,
    parse_recipe_lines,
    price_per_base_unit,
    suggest_usage_unit,
)
from utils.formatting import money, percent

logger = logging.getLogger(__name__)


def get_locale():
    return request.args.get('lang') or current_app.config['BABEL_DEFAULT_LOCALE']


def get_workspace():
    """Workspace loaded from the database for the current request."""
    return Workspace(DatabaseStorage())


def _payload():
    """JSON body if there is one, form fields otherwise."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


# ============================================
# SERIALIZATION
# ============================================

def ingredient_json(record):
    unit_price = price_per_base_unit(record)
    return {
        **record.to_dict(),
        'base_unit': base_unit(record.purchase_unit),
        'price_per_base_unit': str(unit_price),
        'price_per_base_unit_display': money(unit_price),
        'price_display': money(record.purchase_price),
    }


def product_json(recipe):
    return {
        **recipe.to_dict(),
        'total_cost_display': money(recipe.total_cost),
        'sale_price_display': money(recipe.sale_price),
        'margin_display': money(recipe.margin),
        'margin_percent_display': percent(recipe.margin_percent),
    }


def quote_json(cost, margin):
    return {
        'lines': [
            {
                'id': lc.line.id,
                'ingredient_ref': lc.line.ingredient_ref,
                'cost': str(lc.cost),
                'cost_display': money(lc.cost),
                'status': lc.status.value,
            }
            for lc in cost.lines
        ],
        'ingredients_cost': str(cost.ingredients_cost),
        'total_cost': str(cost.total_cost),
        'margin': str(margin.margin),
        'margin_percent': str(margin.margin_percent),
        'has_warnings': cost.has_warnings,
        'ingredients_cost_display': money(cost.ingredients_cost),
        'total_cost_display': money(cost.total_cost),
        'margin_display': money(margin.margin),
        'margin_percent_display': percent(margin.margin_percent),
    }


def _recipe_input(data):
    lines = parse_recipe_lines(data.get('lines'))
    fixed_costs = parse_fixed_costs(data.get('fixed_costs'))
    sale_price = parse_amount(data.get('sale_price'))
    return lines, fixed_costs, sale_price


def register_routes(app):

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return jsonify({'error': str(error), 'field': error.field}), 400

    @app.errorhandler(IngredientNotFound)
    def handle_missing_ingredient(error):
        return jsonify({'error': _('Ingredient not found')}), 404

    @app.errorhandler(RecipeNotFound)
    def handle_missing_product(error):
        return jsonify({'error': _('Product not found')}), 404

    # ============================================
    # OVERVIEW
    # ============================================

    @app.route('/')
    def index():
        workspace = get_workspace()
        return jsonify({
            'ingredients': len(workspace.inventory),
            'products': len(workspace.products),
            'needs_inventory': len(workspace.inventory) == 0,
        })

    @app.route('/units')
    def units():
        return jsonify({
            'families': {
                family: {'units': list(factors), 'base_unit': BASE_UNITS[family]}
                for family, factors in UNIT_FAMILIES.items()
            },
            'purchase_units': list(PURCHASE_UNIT_CHOICES),
            'usage_units': list(USAGE_UNIT_CHOICES),
        })

    # ============================================
    # INGREDIENTS
    # ============================================

    @app.route('/ingredients')
    def ingredients_list():
        workspace = get_workspace()
        return jsonify({'ingredients': [ingredient_json(record) for record in workspace.inventory]})

    @app.route('/ingredient/add', methods=['POST'])
    def ingredient_add():
        record = parse_ingredient(_payload())
        get_workspace().add_ingredient(record)
        return jsonify({
            'message': _('Ingredient added to inventory'),
            'ingredient': ingredient_json(record),
        }), 201

    @app.route('/ingredient/<int:id>/edit', methods=['POST'])
    def ingredient_edit(id):
        workspace = get_workspace()
        changes = parse_ingredient_changes(_payload())
        affected = len(workspace.products.referencing(id))
        record = workspace.update_ingredient(id, **changes)
        return jsonify({
            'ingredient': ingredient_json(record),
            'products_affected': affected,
        })

    @app.route('/ingredient/<int:id>/delete', methods=['POST'])
    def ingredient_delete(id):
        workspace = get_workspace()
        affected = len(workspace.products.referencing(id))
        workspace.remove_ingredient(id)
        return jsonify({
            'message': _('Ingredient deleted'),
            'products_affected': affected,
        })

    # ============================================
    # CALCULATOR
    # ============================================

    @app.route('/calculator/quote', methods=['POST'])
    def calculator_quote():
        lines, fixed_costs, sale_price = _recipe_input(_payload())
        cost, margin = get_workspace().quote(lines, fixed_costs, sale_price)
        return jsonify(quote_json(cost, margin))

    @app.route('/calculator/usage-unit/<int:ingredient_id>')
    def calculator_usage_unit(ingredient_id):
        record = get_workspace().inventory.get(ingredient_id)
        if record is None:
            raise IngredientNotFound(ingredient_id)
        return jsonify({'usage_unit': suggest_usage_unit(record.purchase_unit)})

    # ============================================
    # SAVED PRODUCTS
    # ============================================

    @app.route('/products')
    def products_list():
        workspace = get_workspace()
        products = []
        for recipe in workspace.products:
            item = product_json(recipe)
            item['line_status'] = {
                str(line.id): line_status(line, workspace.inventory).value
                for line in recipe.recipe_lines
            }
            products.append(item)
        return jsonify({'products': products})

    @app.route('/product/save', methods=['POST'])
    def product_save():
        data = _payload()
        name = parse_product_name(data.get('name'))
        lines, fixed_costs, sale_price = _recipe_input(data)
        recipe = get_workspace().save_recipe(name, lines, fixed_costs, sale_price)
        return jsonify({
            'message': _('Product saved'),
            'product': product_json(recipe),
        }), 201

    @app.route('/product/<int:id>/delete', methods=['POST'])
    def product_delete(id):
        get_workspace().remove_recipe(id)
        return jsonify({'message': _('Product deleted')})


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    Babel(app, locale_selector=get_locale)
    db.init_app(app)
    register_routes(app)
    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    with app.app_context():
        db.create_all()
        logger.info("Database ready at %s", app.config['SQLALCHEMY_DATABASE_URI'])


app = create_app()


if __name__ == '__main__':
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
