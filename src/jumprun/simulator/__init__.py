"""Desktop simulator: plays the game in a pygame window."""
