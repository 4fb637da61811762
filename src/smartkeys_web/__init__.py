"""Flask JSON API and playground page on top of smartkeys.Engine."""
