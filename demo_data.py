"""
Demo Data for the Project Collaboration Backend
Admins create projects, members join with the project code, then tasks and queries follow
"""

# Admin onboarding submissions; each admin also registers a project with the same code
DEMO_ADMINS = [
    {
        "email": "priya.sharma@example.com",
        "role": "Admin",
        "position": "Engineering Manager",
        "team_name": "Platform",
        "team_size": "6-10",
        "project_name": "Customer Portal Redesign",
        "project_code": "PORTAL-24",
    },
    {
        "email": "arjun.mehta@example.com",
        "role": "Admin",
        "position": "Finance Lead",
        "team_name": "Finance Ops",
        "team_size": "1-5",
        "project_name": "Reporting Automation",
        "project_code": "FIN-AUTO",
    },
]

# Member submissions; codes are matched case-insensitively against the admins'
DEMO_MEMBERS = [
    {"email": "neha.kapoor@example.com", "role": "Member", "project_code": "portal-24", "member_role": "Frontend Developer"},
    {"email": "rahul.verma@example.com", "role": "Member", "project_code": "PORTAL-24", "member_role": "Backend Developer"},
    {"email": "kavya.nair@example.com", "role": "Member", "project_code": "fin-auto", "member_role": "Analyst"},
]

DEMO_TASKS = [
    {"project_code": "PORTAL-24", "title": "Audit current portal navigation", "deadline": "2026-11-01", "priority": "High", "assignee_name": "Neha Kapoor"},
    {"project_code": "PORTAL-24", "title": "Design new account settings page", "deadline": "2026-11-15", "assignee_name": "Neha Kapoor"},
    {"project_code": "PORTAL-24", "title": "Expose profile API for the redesigned settings page", "deadline": "2026-11-20", "assignee_name": "Rahul Verma"},
    {"project_code": "FIN-AUTO", "title": "Map monthly close checklist", "deadline": "2026-10-30", "priority": "Low", "assignee_name": "Kavya Nair"},
]

DEMO_QUERIES = [
    {"project_code": "PORTAL-24", "text": "Do we keep the legacy login page during the rollout?", "sender_email": "neha.kapoor@example.com"},
    {"project_code": "FIN-AUTO", "text": "Which ledger export format should the first report use?", "sender_email": "kavya.nair@example.com"},
]
