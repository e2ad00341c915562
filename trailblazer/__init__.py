"""TrailBlazer: maps-grounded trail suggestions."""
