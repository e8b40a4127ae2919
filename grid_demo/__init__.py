"""Fixed-size integer grids behind a shared capability contract."""
