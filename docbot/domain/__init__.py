"""Domain model: route records, resolved segments and their protocols."""
