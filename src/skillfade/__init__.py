"""skillfade: track skills, log practice, and model proficiency decay."""

__version__ = "0.1.0"
