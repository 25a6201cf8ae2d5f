"""Services for gwt."""
