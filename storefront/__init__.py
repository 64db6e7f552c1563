"""Restaurant storefront: static menu, shared cart and in-memory order log."""
