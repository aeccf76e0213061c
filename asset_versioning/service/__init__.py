"""Integration points for host asset pipelines and templates."""
