"""Leaf utilities shared by the domain modules: hex codec, PEG combinators, logging."""
