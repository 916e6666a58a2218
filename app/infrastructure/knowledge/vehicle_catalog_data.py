from __future__ import annotations


CAR_MAKES_AND_MODELS: dict[str, list[str]] = {
    "Acura": ["ADX", "Integra", "TLX", "RDX", "MDX", "ZDX"],
    "Alfa Romeo": ["Giulia", "Stelvio", "Tonale"],
    "Aston Martin": ["Vantage", "DB12", "DBX", "Valhalla"],
    "Audi": ["A3", "A4", "A5", "A6", "A7", "A8", "Q3", "Q4 e-tron", "Q5", "Q6 e-tron", "Q7", "Q8", "Q8 e-tron", "e-tron GT", "RS3", "RS5", "RS6", "RS7", "R8"],
    "Bentley": ["Continental GT", "Flying Spur", "Bentayga"],
    "BMW": ["2 Series", "3 Series", "4 Series", "5 Series", "7 Series", "8 Series", "Z4", "i4", "i5", "i7", "X1", "X2", "X3", "X4", "X5", "X6", "X7", "iX", "XM", "M2", "M3", "M4", "M5"],
    "Buick": ["Envista", "Encore GX", "Envision", "Enclave"],
    "Bugatti": ["Chiron"],
    "Cadillac": ["CT4", "CT5", "Celestiq", "XT4", "XT5", "XT6", "Lyriq", "Escalade", "Escalade ESV", "Escalade IQ"],
    "Chevrolet": ["Malibu", "Corvette", "Trax", "Trailblazer", "Equinox", "Blazer", "Traverse", "Tahoe", "Suburban", "Colorado", "Silverado 1500", "Silverado HD", "Silverado EV", "Equinox EV", "Blazer EV"],
    "Chrysler": ["Pacifica"],
    "Dodge": ["Hornet", "Durango", "Charger", "Challenger"],
    "Ferrari": ["SF90 Stradale", "296 GTB/GTS", "Roma", "Purosangue", "812 Superfast", "F8 Tributo"],
    "Fisker": ["Ocean"],
    "Ford": ["Mustang", "Mustang Mach-E", "Maverick", "Ranger", "F-150", "F-150 Lightning", "F-Series Super Duty", "Transit", "Bronco Sport", "Bronco", "Escape", "Explorer", "Expedition"],
    "Genesis": ["G70", "G80", "G90", "GV60", "GV70", "GV80"],
    "GMC": ["Terrain", "Acadia", "Yukon", "Yukon XL", "Canyon", "Sierra 1500", "Sierra HD", "Hummer EV Pickup", "Hummer EV SUV", "Sierra EV"],
    "Honda": ["Civic", "Accord", "HR-V", "CR-V", "Pilot", "Passport", "Odyssey", "Ridgeline", "Prologue"],
    "Hyundai": ["Elantra", "Sonata", "Ioniq 5", "Ioniq 6", "Nexo", "Venue", "Kona", "Tucson", "Santa Fe", "Palisade", "Santa Cruz"],
    "Infiniti": ["Q50", "QX50", "QX55", "QX60", "QX80"],
    "Jaguar": ["F-PACE", "I-PACE", "F-TYPE"],
    "Jeep": ["Compass", "Wrangler", "Gladiator", "Grand Cherokee", "Grand Cherokee L", "Wagoneer", "Wagoneer L", "Grand Wagoneer", "Grand Wagoneer L"],
    "Kia": ["Forte", "K5", "Niro", "EV6", "EV9", "Soul", "Seltos", "Sportage", "Sorento", "Telluride", "Carnival"],
    "Koenigsegg": ["Jesko", "Gemera"],
    "Lamborghini": ["Huracan", "Revuelto", "Urus", "Aventador"],
    "Land Rover": ["Defender", "Discovery", "Discovery Sport", "Range Rover", "Range Rover Sport", "Range Rover Velar", "Range Rover Evoque"],
    "Lexus": ["IS", "ES", "LS", "RC", "RC F", "LC", "UX (Hybrid)", "NX", "RX", "GX", "TX", "LX", "RZ"],
    "Lincoln": ["Corsair", "Nautilus", "Aviator", "Navigator"],
    "Lucid": ["Air", "Gravity"],
    "Maserati": ["Grecale", "Levante", "MC20", "GranTurismo"],
    "Mazda": ["Mazda3", "MX-5 Miata", "CX-30", "CX-5", "CX-50", "CX-90", "MX-30"],
    "McLaren": ["Artura", "750S", "GT", "720S", "765LT"],
    "Mercedes-Benz": ["CLA", "C-Class", "CLE-Class", "E-Class", "S-Class", "SL", "AMG GT", "GLA", "GLB", "GLC", "GLE", "GLS", "G-Class", "EQB", "EQE", "EQE SUV", "EQS", "EQS SUV"],
    "Mini": ["Cooper (Hardtop)", "Cooper Convertible", "Clubman", "Countryman"],
    "Mitsubishi": ["Mirage", "Mirage G4", "Eclipse Cross", "Outlander Sport", "Outlander"],
    "Nissan": ["Versa", "Sentra", "Altima", "Leaf", "Z", "GT-R", "Kicks", "Rogue", "Murano", "Pathfinder", "Armada", "Ariya", "Frontier"],
    "Pagani": ["Utopia", "Huayra"],
    "Polestar": ["2", "3", "4"],
    "Porsche": ["718", "911", "Taycan", "Panamera", "Macan", "Cayenne", "Macan EV"],
    "Ram": ["1500", "1500 Classic", "2500/3500 HD", "ProMaster", "1500 REV"],
    "Rimac": ["Nevera"],
    "Rivian": ["R1T", "R1S"],
    "Rolls-Royce": ["Phantom", "Ghost", "Cullinan", "Spectre"],
    "Subaru": ["Impreza", "Legacy", "BRZ", "WRX", "Crosstrek", "Forester", "Outback", "Ascent", "Solterra"],
    "Tesla": ["Model S", "Model 3", "Model X", "Model Y", "Cybertruck"],
    "Toyota": ["Camry", "Corolla", "Corolla Hatchback", "Crown", "Crown Signia", "Mirai", "Prius", "Prius Prime", "Sienna", "4Runner", "bZ4X", "Corolla Cross", "Grand Highlander", "Highlander", "Land Cruiser", "RAV4", "RAV4 Prime", "Sequoia", "Tacoma", "Tundra", "Supra", "GR86"],
    "VinFast": ["VF8", "VF9"],
    "Volkswagen": ["Jetta", "Golf GTI", "Golf R", "ID.4", "ID.7", "ID.Buzz", "Taos", "Tiguan", "Atlas", "Atlas Cross Sport"],
    "Volvo": ["S60", "S90", "V60", "V60 Cross Country", "V90 Cross Country", "XC40", "C40", "XC60", "XC90", "EX30", "EX90"],
    "Other": ["Other"],
}
