"""
Campaign brief validation.

This module checks campaign briefs before they reach the orchestrator: a brief
needs an objective, an audience and at least one platform. Briefs loaded from
JSON files are also checked against the campaign_form schema.
"""

import os
import json
from typing import Any, Dict

import jsonschema

from campaignforge.campaign.models import CampaignFormData
from campaignforge.core.error_handler import ValidationError, validate_required_fields
from campaignforge.core.logging_config import get_logger
from campaignforge.schemas import load_schema

logger = get_logger(__name__)

REQUIRED_FORM_FIELDS = ["objective", "audience", "platforms"]

class InputValidator:
    """
    Validates campaign briefs.
    """

    def __init__(self):
        self.campaign_form_schema = load_schema("campaign_form")
        logger.debug("Loaded campaign form schema")

    def validate_form(self, form: CampaignFormData) -> CampaignFormData:
        """
        Check that a brief can be submitted.

        Args:
            form (CampaignFormData): The brief

        Returns:
            CampaignFormData: The same brief

        Raises:
            ValidationError: If objective or audience is blank, or no platform is selected
        """
        validate_required_fields(
            {
                "objective": form.objective,
                "audience": form.audience,
                "platforms": [p for p in form.platforms if p.strip()],
            },
            REQUIRED_FORM_FIELDS,
            component="InputValidator"
        )
        return form

    def validate_brief_data(self, brief: Dict[str, Any]) -> CampaignFormData:
        """
        Validate a brief given as a dictionary and convert it to CampaignFormData.

        Args:
            brief (Dict[str, Any]): Brief using the form's keys

        Returns:
            CampaignFormData: The validated brief

        Raises:
            ValidationError: If the brief does not conform to the schema
        """
        try:
            jsonschema.validate(instance=brief, schema=self.campaign_form_schema)
        except jsonschema.exceptions.ValidationError as e:
            path = ".".join(str(p) for p in e.absolute_path) or None
            error_msg = f"Campaign brief validation failed: {e.message}"
            logger.error(error_msg)
            raise ValidationError(error_msg, field=path, value=e.instance)

        return self.validate_form(CampaignFormData.from_dict(brief))

    def validate_campaign_brief(self, brief_path: str) -> CampaignFormData:
        """
        Load and validate a campaign brief JSON file.

        Args:
            brief_path (str): Path to the brief

        Returns:
            CampaignFormData: The validated brief

        Raises:
            FileNotFoundError: If the brief file does not exist
            ValidationError: If the brief is not valid JSON or fails validation
        """
        logger.info(f"Validating campaign brief: {brief_path}")

        if not os.path.isfile(brief_path):
            error_msg = f"Campaign brief file not found: {brief_path}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        try:
            with open(brief_path, 'r', encoding='utf-8') as f:
                brief = json.load(f)
        except json.JSONDecodeError as e:
            error_msg = f"Invalid JSON in campaign brief: {e}"
            logger.error(error_msg)
            raise ValidationError(error_msg)

        form = self.validate_brief_data(brief)
        logger.info("Campaign brief validation successful")
        return form
