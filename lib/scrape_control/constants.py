"""
Constants used throughout the scrape control package.

Centralizes the fixed identifiers, table schema values and the seed
category list so they are not scattered across modules.
"""

# =============================================================================
# Control Record
# =============================================================================

# Partition key value of the singleton configuration record
CONTROL_RECORD_ID = "scrapingconfig"

# Partition key attribute name of the control table
CONTROL_TABLE_KEY = "id"

# Attribute holding the embedded scraping configuration
CONFIG_ATTRIBUTE = "config"


# =============================================================================
# Table Schema
# =============================================================================

# Provisioned throughput for the control table. Not configurable.
READ_CAPACITY_UNITS = 5
WRITE_CAPACITY_UNITS = 5

# DynamoDB error code for a missing table or item
RESOURCE_NOT_FOUND = "ResourceNotFoundException"


# =============================================================================
# AWS / HTTP Defaults
# =============================================================================

DEFAULT_REGION = "eu-west-1"

# Request timeout for the category page fetch (seconds)
DEFAULT_REQUEST_TIMEOUT = 30.0


# =============================================================================
# Config Extraction
# =============================================================================

# Category listing page parsed by the live provider
DEFAULT_CATEGORY_PAGE_URL = "https://www.tesco.com/groceries/en-GB/shop"

# List items of the "current" navigation section
DEFAULT_NAV_SELECTOR = ".current li"

# Seed category list used by the static provider
STATIC_CATEGORY_URLS = (
    "https://www.tesco.com/groceries/en-GB/shop/fresh-food/all",
    "https://www.tesco.com/groceries/en-GB/shop/bakery/all",
    "https://www.tesco.com/groceries/en-GB/shop/frozen-food/all",
    "https://www.tesco.com/groceries/en-GB/shop/food-cupboard/all",
    "https://www.tesco.com/groceries/en-GB/shop/drinks/all",
    "https://www.tesco.com/groceries/en-GB/shop/baby/all",
    "https://www.tesco.com/groceries/en-GB/shop/health-and-beauty/all",
    "https://www.tesco.com/groceries/en-GB/shop/pets/all",
    "https://www.tesco.com/groceries/en-GB/shop/household/all",
    "https://www.tesco.com/groceries/en-GB/shop/home-and-ents/all",
    "https://www.tesco.com/groceries/en-GB/shop/easter/all",
)
