"""Static validation of the Phoenix SharePoint theme package."""
