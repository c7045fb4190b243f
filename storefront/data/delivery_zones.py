# Inclusive pincode ranges. Ranges must not overlap; lookup takes the first match.
DELIVERY_ZONES = [
    {"pincode_start": "110001", "pincode_end": "110099", "delivery_days": "3 days", "zone": "fast"},
    {"pincode_start": "400001", "pincode_end": "400099", "delivery_days": "3 days", "zone": "fast"},
    {"pincode_start": "560001", "pincode_end": "560099", "delivery_days": "3 days", "zone": "fast"},
    {"pincode_start": "700001", "pincode_end": "700099", "delivery_days": "3 days", "zone": "fast"},
    {"pincode_start": "600001", "pincode_end": "600099", "delivery_days": "5-7 days", "zone": "standard"},
    {"pincode_start": "500001", "pincode_end": "500099", "delivery_days": "5-7 days", "zone": "standard"},
    {"pincode_start": "302001", "pincode_end": "302099", "delivery_days": "5-7 days", "zone": "standard"},
    {"pincode_start": "380001", "pincode_end": "380099", "delivery_days": "5-7 days", "zone": "standard"},
]
