"""
Student-friendly error message templates for PHYS 2150 applications.

Maps technical errors to actionable guidance that answers:
1. What happened?
2. Why might it have happened?
3. What should I do?
"""

from dataclasses import dataclass
from typing import List, Optional, Dict


@dataclass
class ErrorTemplate:
    """Template for a student-friendly error message."""
    title: str
    message: str
    causes: List[str]
    actions: List[str]


# Photoelectric Simulator Error Templates
PHOTOELECTRIC_ERRORS: Dict[str, ErrorTemplate] = {
    "invalid_parameter": ErrorTemplate(
        title="Invalid Experiment Setting",
        message="One of the experiment settings is outside the allowed range.",
        causes=[
            "A value was typed outside the slider range",
            "A value is not a number",
        ],
        actions=[
            "Check the allowed range shown next to each control",
            "Reset the experiment to restore the default settings",
        ]
    ),

    "no_data": ErrorTemplate(
        title="No Measurements Yet",
        message="There is no data to export.",
        causes=[
            "The light has not been switched on",
            "The experiment was reset after the last measurements",
        ],
        actions=[
            "Switch on the light",
            "Move the voltage control to take measurements, then export again",
        ]
    ),

    "no_photocurrent": ErrorTemplate(
        title="No Photocurrent",
        message="The light is on but no electrons reach the collector.",
        causes=[
            "Photon energy is below the work function of this metal "
            "(wavelength longer than the threshold wavelength)",
            "The retarding voltage is at or above the stopping potential",
            "Light intensity is set to zero",
        ],
        actions=[
            "Compare the wavelength with the threshold wavelength",
            "Lower the voltage below the stopping potential",
            "Increase the intensity",
        ]
    ),

    "data_save_failed": ErrorTemplate(
        title="Could Not Save Data",
        message="Failed to save the measurement data to file.",
        causes=[
            "Disk is full",
            "File is open in another program",
            "Invalid characters in filename",
        ],
        actions=[
            "Check available disk space",
            "Close any programs that might have the file open",
            "Try saving with a different filename",
        ]
    ),
}


def get_error(error_key: str) -> Optional[ErrorTemplate]:
    """
    Get an error template by key.

    Args:
        error_key: The error identifier (e.g., "no_data")

    Returns:
        ErrorTemplate if found, None otherwise
    """
    return PHOTOELECTRIC_ERRORS.get(error_key)


def format_error_message(template: ErrorTemplate) -> str:
    """
    Format an error template as a plain text message.

    Args:
        template: The error template to format

    Returns:
        Formatted error message string
    """
    lines = [
        template.title,
        "",
        template.message,
        "",
    ]

    if template.causes:
        lines.append("Possible causes:")
        for cause in template.causes:
            lines.append(f"  - {cause}")
        lines.append("")

    if template.actions:
        lines.append("What to do:")
        for action in template.actions:
            lines.append(f"  - {action}")

    return "\n".join(lines)
