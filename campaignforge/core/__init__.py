"""
Core utilities and configuration for the campaignforge package.
"""

from campaignforge.core.config import get_config, get_config_value, get_agent_ids, get_storage_directory
from campaignforge.core.credentials import get_api_key
from campaignforge.core.logging_config import get_logger, configure_logging
from campaignforge.core.utils import count_words, generate_unique_id, sanitize_filename
from campaignforge.core.error_handler import APIError, ValidationError, ConfigurationError
