"""Domain layer - ports and value objects shared by search, tools and voice."""
