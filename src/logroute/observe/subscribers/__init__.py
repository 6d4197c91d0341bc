"""Event subscribers registered on LogRouteEventLinker."""
