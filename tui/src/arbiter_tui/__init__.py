"""arbiter-tui: terminal front end for the Arbiter coordinator."""
