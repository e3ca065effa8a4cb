"""Core PCA algorithms: mean handling, dimension selection and fitting."""
