"""Centralized brand configuration for user-facing copy."""

BRAND_NAME = "Startup911"
BRAND_DOMAIN = "startup911.in"
BRAND_PRODUCT_NAME = "Startup Funding Directory"
BRAND_APP_DESCRIPTION = "Grants, VCs and mentors matched to Indian startups"
