"""API layer - routers, dependencies, middleware and error translation"""
