# Services package init
"""
Chirpy Backend — Services Layer
=================================

What:  Logic that routes call into, free of HTTP concerns.

Service Inventory:
    - WordClassifier / ChirpModerator (moderation.py): length check and
      banned-word redaction, pure and synchronous
    - RequestCounter (hit_counter.py): thread-safe hit counter owned by
      each app instance
    - UserService (user_service.py): user record creation
"""
