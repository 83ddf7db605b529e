from .filter_user import build_filter_user
from .run_campaign import build_run_campaign
from .send_in_app_messages import build_send_in_app_messages

__all__ = ["build_filter_user", "build_run_campaign", "build_send_in_app_messages"]
