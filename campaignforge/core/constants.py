"""
Constants for the campaignforge package.

This module provides constants used throughout the campaignforge package.
These constants can be easily changed in one place.
"""

# Agent identities
ORCHESTRATOR_AGENT_ID = "69a2883be72641e0c6070afe"
GRAPHIC_DESIGNER_AGENT_ID = "69a2883b00b22915dd81e1aa"
VIDEO_BRIEF_AGENT_ID = "69a2883bd6fa89687c20afcf"

DEFAULT_AGENT_IDS = {
    "orchestrator": ORCHESTRATOR_AGENT_ID,
    "graphic_designer": GRAPHIC_DESIGNER_AGENT_ID,
    "video_brief": VIDEO_BRIEF_AGENT_ID,
}

# Agent Gateway
DEFAULT_AGENT_ENDPOINT = "http://localhost:3000/api/agent"
DEFAULT_AGENT_TIMEOUT = 300

# Persisted state keys
CAMPAIGNS_STORAGE_KEY = "mcc_campaigns"
BRAND_SETTINGS_STORAGE_KEY = "mcc_brand_settings"
DEFAULT_STORAGE_DIRECTORY = "~/.campaignforge/data"

# Campaign values
CAMPAIGN_STATUSES = ["draft", "active", "complete"]
DEFAULT_CAMPAIGN_STATUS = "active"
CAMPAIGN_NAME_FALLBACK_LENGTH = 50
DEFAULT_VIDEO_TITLE = "Untitled Video"

PLATFORM_OPTIONS = ["Blog", "Instagram", "LinkedIn", "Twitter", "Email", "Ad"]
INDUSTRY_OPTIONS = [
    "Technology", "Health & Wellness", "Finance", "E-commerce", "Education", "SaaS",
    "Real Estate", "Food & Beverage", "Fashion", "Automotive", "Travel", "Entertainment", "Other"
]

# Screens
SCREEN_DASHBOARD = "dashboard"
SCREEN_BUILDER = "builder"
SCREEN_REVIEW = "review"

# Status messages
ERROR_PREFIX = "Error: "
