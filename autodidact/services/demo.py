"""Demo sign-in: the fixed identity and the URL marker that announces it."""

DEMO_MARKER_PARAM = "message"
DEMO_MARKER_VALUE = "signed-in-demo"
LOGGED_OUT_MARKER_VALUE = "logged-out"

DEMO_USER_ID = "demo-user-123"
DEMO_USER_PROFILE = {
    "email": "demo@example.com",
    "first_name": "Demo",
    "last_name": "User",
    "profile_image_url": (
        "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=32&h=32&fit=crop&crop=face"
    ),
}
