"""Console user interface: status screens, listings and interactive menus."""
