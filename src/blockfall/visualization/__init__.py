"""Front ends for Blockfall: character-grid text frames and the pygame window."""
