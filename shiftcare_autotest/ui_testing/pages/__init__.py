"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element selectors
    - Page-specific flows
    - Verification helpers

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage

__all__ = [
    "LoginPage",
]
