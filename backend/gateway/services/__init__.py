# Services package init
"""
Board Gateway - Services Layer
===============================

Service Inventory:
    - ResourceService: Generic capped CRUD over one table
    - UserService: Users, with bcrypt hashing on create/update
    - content_service: Content posts (plain ResourceService)
    - AnnouncementService: Announcements, with the expired flag on reads
    - RegisteredEmailService: Mailing-list registrations
    - AuthService: Email/password login
"""
