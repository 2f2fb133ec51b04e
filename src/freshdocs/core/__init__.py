"""Content discovery core: parsing, ordering and resolution of latest entries."""
