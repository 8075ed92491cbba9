import logging
from typing import Optional

from flask import Flask, request, jsonify

from core.config import load_settings
from core.store import VioletStore
from models.order import OrderStatus
from ui.display import RegionDisplay


def _status_for(result):
    if result["success"]:
        return 200
    if result.get("redirect"):
        return 401
    return 400


def create_app(store: Optional[VioletStore] = None) -> Flask:
    """Build the JSON API around one storefront instance"""
    settings = store.settings if store else load_settings()
    if store is None:
        store = VioletStore(settings, display=RegionDisplay())

    app = Flask(__name__)
    app.secret_key = settings.secret_key

    def _json_body():
        return request.get_json(silent=True) or {}

    @app.route('/health')
    def health():
        """Health check endpoint"""
        return jsonify({'status': 'ok', 'message': 'VioletStore is running!'})

    @app.route('/api/products')
    def products():
        term = request.args.get('q', '').strip()
        if term:
            try:
                limit = int(request.args.get('limit', 5))
            except ValueError:
                return jsonify({'success': False, 'error': 'limit must be an integer'}), 400
            return jsonify(store.find_product(term, limit=limit))
        return jsonify({'success': True, 'products': store.get_products()})

    @app.route('/api/products/<int:product_id>')
    def product_detail(product_id):
        product = store.get_product_by_id(product_id)
        if not product:
            return jsonify({'success': False, 'error': 'Product not found'}), 404
        return jsonify({'success': True, 'product': product})

    @app.route('/api/cart')
    def cart():
        return jsonify(store.get_cart_details())

    @app.route('/api/cart', methods=['DELETE'])
    def clear_cart():
        return jsonify(store.clear_cart())

    @app.route('/api/cart/items', methods=['POST'])
    def add_item():
        data = _json_body()
        try:
            product_id = int(data['product_id'])
            quantity = int(data.get('quantity', 1))
        except (KeyError, TypeError, ValueError):
            return jsonify({'success': False, 'error': 'product_id and quantity must be integers'}), 400

        result = store.add_to_cart(product_id, quantity)
        if not result['success'] and result['error'] == 'Product not found':
            return jsonify(result), 404
        return jsonify(result), _status_for(result)

    @app.route('/api/cart/items/<int:product_id>', methods=['PATCH'])
    def update_item(product_id):
        data = _json_body()
        try:
            quantity = int(data['quantity'])
        except (KeyError, TypeError, ValueError):
            return jsonify({'success': False, 'error': 'quantity must be an integer'}), 400
        result = store.update_cart_item(product_id, quantity)
        return jsonify(result), _status_for(result)

    @app.route('/api/cart/items/<int:product_id>', methods=['DELETE'])
    def remove_item(product_id):
        return jsonify(store.remove_from_cart(product_id))

    @app.route('/api/cart/discount', methods=['POST'])
    def apply_discount():
        result = store.apply_discount(str(_json_body().get('code', '')))
        return jsonify(result), _status_for(result)

    @app.route('/api/cart/discount', methods=['DELETE'])
    def remove_discount():
        return jsonify(store.remove_discount())

    @app.route('/api/checkout', methods=['POST'])
    def checkout():
        result = store.process_checkout()
        return jsonify(result), _status_for(result)

    @app.route('/api/login', methods=['POST'])
    def login():
        data = _json_body()
        result = store.login(str(data.get('email', '')), str(data.get('password', '')))
        return jsonify(result), _status_for(result)

    @app.route('/api/register', methods=['POST'])
    def register():
        data = _json_body()
        result = store.register(str(data.get('name', '')), str(data.get('email', '')),
                                str(data.get('password', '')))
        return jsonify(result), _status_for(result)

    @app.route('/api/logout', methods=['POST'])
    def logout():
        return jsonify(store.logout())

    @app.route('/api/orders')
    def orders():
        if not store.auth_service.is_authenticated():
            return jsonify({'success': False, 'error': 'Authentication required', 'redirect': 'login'}), 401
        return jsonify({'success': True, 'orders': store.get_order_history()})

    @app.route('/api/orders/<int:order_id>/cancel', methods=['POST'])
    def cancel_order(order_id):
        result = store.cancel_order(order_id)
        if not result['success'] and store.order_service.get_order(order_id) is None:
            return jsonify(result), 404
        return jsonify(result), _status_for(result)

    @app.route('/api/orders/<int:order_id>/status', methods=['POST'])
    def update_order_status(order_id):
        try:
            status = OrderStatus(_json_body().get('status'))
        except ValueError:
            return jsonify({'success': False, 'error': 'Unknown order status'}), 400
        result = store.order_service.update_order_status(order_id, status)
        return jsonify(result), _status_for(result)

    @app.route('/api/navigation')
    def navigation_state():
        return jsonify({
            'view': store.navigation.current_view.value,
            'history': [view.value for view in store.navigation.get_history()],
            'can_go_back': store.navigation.can_go_back()
        })

    @app.route('/api/navigation', methods=['POST'])
    def navigate():
        data = _json_body()
        if not store.navigate_to(data.get('view'), data.get('data')):
            return jsonify({'success': False, 'error': f"Invalid view: {data.get('view')}"}), 400
        return jsonify({'success': True, 'view': store.navigation.current_view.value})

    @app.route('/api/navigation/back', methods=['POST'])
    def go_back():
        return jsonify({'success': True, 'view': store.go_back().value})

    @app.route('/api/blog')
    def blog():
        return jsonify({'success': True, 'posts': store.get_blog_posts()})

    return app


def main(store: Optional[VioletStore] = None):
    settings = store.settings if store else load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    print("=== VioletStore Server ===")
    print(f"Starting server on http://localhost:{settings.port}")
    print("Press Ctrl+C to stop")

    app = create_app(store or VioletStore(settings, display=RegionDisplay()))
    # One request at a time: the store is shared and unlocked
    app.run(
        host='0.0.0.0',
        port=settings.port,
        debug=settings.debug,
        threaded=False
    )


if __name__ == '__main__':
    main()
