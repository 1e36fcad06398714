"""HTTP service exposing mdtoc."""
