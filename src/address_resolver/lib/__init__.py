"""Library packages: the resolution core and its external collaborators."""
