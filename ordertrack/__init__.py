"""Order tracking backend: users, the orders they place, and the rules for changing them."""
