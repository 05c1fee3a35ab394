from enum import Enum

class View(str, Enum):
    HOME = "home"
    CALCULATOR = "calculator"
    DUE_DATE = "duedate"
    URINE = "urinetest"
    SKIN = "skin"
    XRAY = "xray"
    BLOOD = "analyzer"
    TRANSPORT = "transport"
    COMPATIBILITY = "compatibility"
    EMERGENCY = "emergency"

VIEW_CONFIG = {
    View.HOME: {"label": "Home", "icon": "🏠", "page": "app.py",
                "summary": "Overview of all QuickMed tools."},
    View.CALCULATOR: {"label": "Dose", "icon": "💊", "page": "pages/1_Dose_Calculator.py",
                      "summary": "Weight-based pediatric syrup dosing."},
    View.DUE_DATE: {"label": "Pregnancy", "icon": "🤰", "page": "pages/2_Pregnancy_Due_Date.py",
                    "summary": "Estimated due date from the last menstrual period."},
    View.URINE: {"label": "Urine", "icon": "🧪", "page": "pages/3_Urine_Test.py",
                 "summary": "Read a urine dipstick or HCG pregnancy strip."},
    View.SKIN: {"label": "Skin", "icon": "✋", "page": "pages/4_Skin_Analysis.py",
                "summary": "Educational look at a rash or skin lesion."},
    View.XRAY: {"label": "X-Ray", "icon": "🩻", "page": "pages/5_Xray_Analysis.py",
                "summary": "Body part and obvious abnormalities on an X-ray."},
    View.BLOOD: {"label": "Blood", "icon": "🔬", "page": "pages/6_Blood_Group.py",
                 "summary": "Probable blood group from a typing slide."},
    View.TRANSPORT: {"label": "Transport", "icon": "🚑", "page": "pages/7_Transport.py",
                     "summary": "Request an ambulance tier."},
    View.COMPATIBILITY: {"label": "Matrix", "icon": "🤝", "page": "pages/8_Compatibility_Matrix.py",
                         "summary": "Donor to recipient blood compatibility."},
    View.EMERGENCY: {"label": "Emergency", "icon": "🚨", "page": "pages/9_Emergency.py",
                     "summary": "Police, ambulance and poison information numbers."},
}

def feature_views():
    return [view for view in View if view != View.HOME]
