# Sample data loaded at startup and by the admin reset.
# Rows reference each other by natural key; the seeder resolves them to ids.
from datetime import date

ADMINS = [
    {
        "username": "admin",
        "password": "admin",
        "email": "admin@chubb.com",
        "first_name": "Super",
        "last_name": "Admin",
        "role": "superadmin",
        "is_super_admin": True,
        "is_active": True,
    },
]

AGENTS = [
    {
        "agent_code": "AGT001", "first_name": "Luna", "last_name": "Stormweaver",
        "email": "luna.stormweaver@chubb.com", "phone": "555-0101",
        "license_number": "INS123456", "commission_rate": 0.05, "territory": "Northeast",
    },
    {
        "agent_code": "AGT002", "first_name": "Phoenix", "last_name": "Dragonheart",
        "email": "phoenix.dragonheart@chubb.com", "phone": "555-0102",
        "license_number": "INS234567", "commission_rate": 0.045, "territory": "West Coast",
    },
    {
        "agent_code": "AGT003", "first_name": "Aria", "last_name": "Moonwhisper",
        "email": "aria.moonwhisper@chubb.com", "phone": "555-0103",
        "license_number": "INS345678", "commission_rate": 0.055, "territory": "Southeast",
    },
    {
        "agent_code": "AGT004", "first_name": "Zara", "last_name": "Brightforge",
        "email": "zara.brightforge@chubb.com", "phone": "555-0104",
        "license_number": "INS456789", "commission_rate": 0.048, "territory": "Midwest",
    },
    {
        "agent_code": "AGT005", "first_name": "Kai", "last_name": "Shadowbane",
        "email": "kai.shadowbane@chubb.com", "phone": "555-0105",
        "license_number": "INS567890", "commission_rate": 0.052, "territory": "Southwest",
    },
]

BROKERS = [
    {
        "broker_code": "BRK001", "first_name": "Marcus", "last_name": "Silverstone",
        "email": "marcus.silverstone@silverstone-insurance.com", "phone": "555-2001",
        "license_number": "BRK123456", "company_name": "Silverstone Insurance Brokers",
        "commission_rate": 0.08, "territory": "Northeast",
        "specialization": "Commercial & Personal Lines",
    },
    {
        "broker_code": "BRK002", "first_name": "Victoria", "last_name": "Goldsmith",
        "email": "victoria.goldsmith@goldsmith-brokers.com", "phone": "555-2002",
        "license_number": "BRK234567", "company_name": "Goldsmith Insurance Group",
        "commission_rate": 0.075, "territory": "West Coast",
        "specialization": "High Net Worth Individuals",
    },
    {
        "broker_code": "BRK003", "first_name": "Alexander", "last_name": "Ironbridge",
        "email": "alex.ironbridge@ironbridge-insurance.com", "phone": "555-2003",
        "license_number": "BRK345678", "company_name": "Ironbridge Risk Solutions",
        "commission_rate": 0.07, "territory": "Southeast",
        "specialization": "Commercial Property & Casualty",
    },
    {
        "broker_code": "BRK004", "first_name": "Sophia", "last_name": "Diamondfield",
        "email": "sophia.diamondfield@diamondfield-brokers.com", "phone": "555-2004",
        "license_number": "BRK456789", "company_name": "Diamondfield Insurance Services",
        "commission_rate": 0.085, "territory": "Midwest",
        "specialization": "Life & Health Insurance",
    },
    {
        "broker_code": "BRK005", "first_name": "William", "last_name": "Copperhill",
        "email": "william.copperhill@copperhill-insurance.com", "phone": "555-2005",
        "license_number": "BRK567890", "company_name": "Copperhill Insurance Partners",
        "commission_rate": 0.078, "territory": "Southwest",
        "specialization": "Auto & Home Insurance",
    },
]

# Plaintext passwords; hashed when seeded
CUSTOMERS = [
    {
        "customer_number": "CUST001", "email": "wizard.mcspellcaster@email.com", "password": "password123",
        "first_name": "Wizard", "last_name": "McSpellcaster", "date_of_birth": date(1985, 3, 15),
        "phone": "555-1001", "address": "123 Enchanted Lane", "city": "New York", "state": "NY",
        "zip_code": "10001", "ssn": "123456789", "employment_status": "employed",
        "annual_income": 75000, "credit_score": 720, "kyc_status": "approved",
        "customer_type": "individual", "agent": "AGT001",
    },
    {
        "customer_number": "CUST002", "email": "captain.awesome@email.com", "password": "secure456",
        "first_name": "Captain", "last_name": "Awesome", "date_of_birth": date(1990, 7, 22),
        "phone": "555-1002", "address": "456 Victory Blvd", "city": "Los Angeles", "state": "CA",
        "zip_code": "90210", "ssn": "234567890", "employment_status": "employed",
        "annual_income": 85000, "credit_score": 750, "kyc_status": "approved",
        "customer_type": "individual", "agent": "AGT002",
    },
    {
        "customer_number": "CUST003", "email": "ninja.stealthmaster@email.com", "password": "mypass789",
        "first_name": "Ninja", "last_name": "Stealthmaster", "date_of_birth": date(1978, 12, 5),
        "phone": "555-1003", "address": "789 Shadow Drive", "city": "Miami", "state": "FL",
        "zip_code": "33101", "ssn": "345678901", "employment_status": "self-employed",
        "annual_income": 95000, "credit_score": 680, "kyc_status": "pending",
        "customer_type": "individual", "agent": "AGT003",
    },
    {
        "customer_number": "CUST004", "email": "princess.sparkles@email.com", "password": "pass2023",
        "first_name": "Princess", "last_name": "Sparkles", "date_of_birth": date(1992, 9, 18),
        "phone": "555-1004", "address": "321 Rainbow Street", "city": "Chicago", "state": "IL",
        "zip_code": "60601", "ssn": "456789012", "employment_status": "employed",
        "annual_income": 68000, "credit_score": 740, "kyc_status": "approved",
        "customer_type": "individual", "agent": "AGT001",
    },
    {
        "customer_number": "CUST005", "email": "bob.thecoolestguy@email.com", "password": "coolpass123",
        "first_name": "Bob", "last_name": "TheCoolestGuy", "date_of_birth": date(1987, 11, 30),
        "phone": "555-1005", "address": "999 Rad Avenue", "city": "Portland", "state": "OR",
        "zip_code": "97201", "ssn": "567890123", "employment_status": "employed",
        "annual_income": 72000, "credit_score": 710, "kyc_status": "approved",
        "customer_type": "individual", "agent": "AGT004",
    },
    {
        "customer_number": "CUST006", "email": "lady.dragonslayer@email.com", "password": "dragonfire99",
        "first_name": "Lady", "last_name": "Dragonslayer", "date_of_birth": date(1984, 5, 12),
        "phone": "555-1006", "address": "777 Knight Court", "city": "Denver", "state": "CO",
        "zip_code": "80202", "ssn": "678901234", "employment_status": "self-employed",
        "annual_income": 120000, "credit_score": 780, "kyc_status": "approved",
        "customer_type": "individual", "agent": "AGT005",
    },
]

POLICIES = [
    {
        "policy_number": "POL001", "customer": "CUST001", "broker": "BRK001",
        "policy_type": "auto", "product_name": "Comprehensive Auto Insurance",
        "coverage_amount": 50000, "premium_amount": 1200, "deductible": 500, "policy_term": 12,
        "start_date": date(2024, 1, 1), "end_date": date(2024, 12, 31),
        "status": "active", "underwriting_status": "approved", "risk_score": 3,
    },
    {
        "policy_number": "POL002", "customer": "CUST001", "broker": "BRK002",
        "policy_type": "home", "product_name": "Homeowners Insurance Plus",
        "coverage_amount": 300000, "premium_amount": 1800, "deductible": 1000, "policy_term": 12,
        "start_date": date(2024, 2, 1), "end_date": date(2025, 1, 31),
        "status": "active", "underwriting_status": "approved", "risk_score": 2,
    },
    {
        "policy_number": "POL003", "customer": "CUST002", "broker": "BRK003",
        "policy_type": "auto", "product_name": "Standard Auto Coverage",
        "coverage_amount": 35000, "premium_amount": 950, "deductible": 750, "policy_term": 12,
        "start_date": date(2024, 3, 15), "end_date": date(2025, 3, 14),
        "status": "active", "underwriting_status": "approved", "risk_score": 4,
    },
    {
        "policy_number": "POL004", "customer": "CUST003", "broker": "BRK004",
        "policy_type": "life", "product_name": "Term Life Insurance",
        "coverage_amount": 500000, "premium_amount": 600, "deductible": 0, "policy_term": 120,
        "start_date": date(2024, 1, 15), "end_date": date(2034, 1, 14),
        "status": "pending", "underwriting_status": "pending", "risk_score": None,
    },
    {
        "policy_number": "POL005", "customer": "CUST004", "broker": "BRK005",
        "policy_type": "renters", "product_name": "Renters Protection Plan",
        "coverage_amount": 25000, "premium_amount": 300, "deductible": 250, "policy_term": 12,
        "start_date": date(2024, 4, 1), "end_date": date(2025, 3, 31),
        "status": "active", "underwriting_status": "approved", "risk_score": 2,
    },
]

COVERAGE_DETAILS = [
    {"policy": "POL001", "coverage_type": "Liability", "coverage_limit": 25000, "deductible": 0, "premium_portion": 600},
    {"policy": "POL001", "coverage_type": "Collision", "coverage_limit": 15000, "deductible": 500, "premium_portion": 400},
    {"policy": "POL001", "coverage_type": "Comprehensive", "coverage_limit": 10000, "deductible": 500, "premium_portion": 200},
    {"policy": "POL002", "coverage_type": "Dwelling", "coverage_limit": 250000, "deductible": 1000, "premium_portion": 1200},
    {"policy": "POL002", "coverage_type": "Personal Property", "coverage_limit": 50000, "deductible": 500, "premium_portion": 600},
]

CLAIMS = [
    {
        "claim_number": "CLM001", "policy": "POL001", "customer": "CUST001",
        "claim_type": "auto_accident", "incident_date": date(2024, 5, 15),
        "claim_amount": 3500, "approved_amount": 3200, "status": "approved", "priority": "medium",
        "description": "Rear-end collision on Highway 95",
        "incident_location": "Highway 95, Mile Marker 42", "police_report_number": "PR2024-5501",
    },
    {
        "claim_number": "CLM002", "policy": "POL002", "customer": "CUST001",
        "claim_type": "water_damage", "incident_date": date(2024, 6, 22),
        "claim_amount": 8500, "approved_amount": None, "status": "under_review", "priority": "high",
        "description": "Burst pipe in basement caused flooding",
        "incident_location": "123 Main St, New York, NY",
    },
    {
        "claim_number": "CLM003", "policy": "POL003", "customer": "CUST002",
        "claim_type": "vandalism", "incident_date": date(2024, 7, 3),
        "claim_amount": 1200, "approved_amount": 1200, "status": "paid", "priority": "low",
        "description": "Vehicle vandalized in parking lot",
        "incident_location": "Shopping Mall Parking Lot, Los Angeles, CA",
    },
]
