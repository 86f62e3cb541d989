"""Core data structures and the SocialNetwork facade."""
