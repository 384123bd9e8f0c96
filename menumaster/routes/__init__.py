def register_blueprints(app):
    # Import inside function to avoid circular imports
    from menumaster.routes.category_routes import category_bp
    app.register_blueprint(category_bp, url_prefix="/api/categories")

    from menumaster.routes.offer_routes import offer_bp
    app.register_blueprint(offer_bp, url_prefix="/api/offers")

    from menumaster.routes.product_routes import product_bp
    app.register_blueprint(product_bp, url_prefix="/api/products")

    from menumaster.routes.restaurant_admin_routes import restaurant_admin_bp
    app.register_blueprint(restaurant_admin_bp, url_prefix="/api/restaurant-admins")

    from menumaster.routes.restaurant_routes import restaurant_bp
    app.register_blueprint(restaurant_bp, url_prefix="/api/restaurants")
