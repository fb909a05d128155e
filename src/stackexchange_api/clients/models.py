#!/usr/bin/env python3
"""
Lesson: models
Created: 2026-10-17T11:25:09+01:00
Project: stackexchange_api
Template: script
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stackexchange_api.clients.records import wrapper_object

#==============================================================================
# RECORD MODELS (Stack Exchange API v1.1)
#==============================================================================

class BadgeCounts(BaseModel):
    """Gold/silver/bronze totals nested inside a user"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    gold: int
    silver: int
    bronze: int


@wrapper_object("users")
class User(BaseModel):
    """A site user as returned by /users/{id}"""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: int = Field(..., alias="user_id")
    display_name: str
    reputation: int
    badge_counts: BadgeCounts


@wrapper_object("reputation_changes")
class ReputationChange(BaseModel):
    """One reputation event from /users/{id}/reputation"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Numeric Unix timestamp on the wire, parsed to an aware UTC datetime
    on_date: datetime
    title: str
    positive_rep: int
    negative_rep: int

    user_id: Optional[int] = None
    post_id: Optional[int] = None
    post_type: Optional[str] = None
