# site_settings/defaults.py

"""
Values served for a settings key that was never saved. Stored data is
merged over these, so new keys added here show up for old rows too.
"""

GENERAL_DEFAULTS = {
    "show_pwa_prompt": False,
    "primary_color": "#6b7c3f",
    "secondary_color": "#c2703d",
    "accent_color": "#e8d5b7",
    "contact_email": "",
    "contact_phone": "",
    "whatsapp_number": "",
    "instagram_url": "",
    "tiktok_url": "",
    "facebook_url": "",
    "footer_text": "",
    "show_social_in_footer": True,
    "banner_background_color": "#1f2a1a",
    "banner_overlay_opacity": 0.4,
    "enable_animations": True,
    "button_style": "rounded",
}

HOME_DEFAULTS = {
    "profile_image_url": "",
    "banner_images": [],
    "hero_title": "",
    "hero_subtitle": "",
    "content_title": "",
    "content_text": "",
    "video_type": "none",
    "video_url": "",
    "video_file": "",
    "video_size": "medium",
    "video_position": "right",
    "background_style": "",
}

MUSIC_DEFAULTS = {
    "enabled": False,
    "volume": 0.5,
    "play_mode": "playlist",
    "tracks": [],
}
