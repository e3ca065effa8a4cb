"""Data structures for pcafit: fitting options, the fitted model and its storage schema."""
