"""Development environment wiring for the Harbor container registry on top of
the Dagger engine.

"""
