"""Rules shared by every supported version."""
