# obdcodec/tables/dtc_codes.py
# Generic (SAE J2012) trouble code descriptions. Manufacturer codes (P1xxx etc.) are not listed.
from __future__ import annotations

from types import MappingProxyType

DTC_DESCRIPTIONS = MappingProxyType({
    # fuel and air metering
    "P0010": "Intake Camshaft Position Actuator Circuit (Bank 1)",
    "P0011": "Intake Camshaft Position Timing Over-Advanced or System Performance (Bank 1)",
    "P0012": "Intake Camshaft Position Timing Over-Retarded (Bank 1)",
    "P0013": "Exhaust Camshaft Position Actuator Circuit (Bank 1)",
    "P0014": "Exhaust Camshaft Position Timing Over-Advanced or System Performance (Bank 1)",
    "P0016": "Crankshaft Position - Camshaft Position Correlation (Bank 1 Sensor A)",
    "P0017": "Crankshaft Position - Camshaft Position Correlation (Bank 1 Sensor B)",
    "P0020": "Intake Camshaft Position Actuator Circuit (Bank 2)",
    "P0030": "HO2S Heater Control Circuit (Bank 1 Sensor 1)",
    "P0031": "HO2S Heater Control Circuit Low (Bank 1 Sensor 1)",
    "P0032": "HO2S Heater Control Circuit High (Bank 1 Sensor 1)",
    "P0036": "HO2S Heater Control Circuit (Bank 1 Sensor 2)",
    "P0037": "HO2S Heater Control Circuit Low (Bank 1 Sensor 2)",
    "P0038": "HO2S Heater Control Circuit High (Bank 1 Sensor 2)",
    "P0068": "MAP/MAF - Throttle Position Correlation",
    "P0087": "Fuel Rail/System Pressure - Too Low",
    "P0088": "Fuel Rail/System Pressure - Too High",
    "P0100": "Mass or Volume Air Flow Circuit Malfunction",
    "P0101": "Mass or Volume Air Flow Circuit Range/Performance Problem",
    "P0102": "Mass or Volume Air Flow Circuit Low Input",
    "P0103": "Mass or Volume Air Flow Circuit High Input",
    "P0104": "Mass or Volume Air Flow Circuit Intermittent",
    "P0105": "Manifold Absolute Pressure/Barometric Pressure Circuit Malfunction",
    "P0106": "Manifold Absolute Pressure/Barometric Pressure Circuit Range/Performance Problem",
    "P0107": "Manifold Absolute Pressure/Barometric Pressure Circuit Low Input",
    "P0108": "Manifold Absolute Pressure/Barometric Pressure Circuit High Input",
    "P0110": "Intake Air Temperature Circuit Malfunction",
    "P0111": "Intake Air Temperature Circuit Range/Performance Problem",
    "P0112": "Intake Air Temperature Circuit Low Input",
    "P0113": "Intake Air Temperature Circuit High Input",
    "P0115": "Engine Coolant Temperature Circuit Malfunction",
    "P0116": "Engine Coolant Temperature Circuit Range/Performance Problem",
    "P0117": "Engine Coolant Temperature Circuit Low Input",
    "P0118": "Engine Coolant Temperature Circuit High Input",
    "P0120": "Throttle Position Sensor/Switch A Circuit Malfunction",
    "P0121": "Throttle Position Sensor/Switch A Circuit Range/Performance Problem",
    "P0122": "Throttle Position Sensor/Switch A Circuit Low Input",
    "P0123": "Throttle Position Sensor/Switch A Circuit High Input",
    "P0125": "Insufficient Coolant Temperature for Closed Loop Fuel Control",
    "P0128": "Coolant Thermostat (Coolant Temperature Below Thermostat Regulating Temperature)",
    "P0130": "O2 Sensor Circuit Malfunction (Bank 1 Sensor 1)",
    "P0131": "O2 Sensor Circuit Low Voltage (Bank 1 Sensor 1)",
    "P0132": "O2 Sensor Circuit High Voltage (Bank 1 Sensor 1)",
    "P0133": "O2 Sensor Circuit Slow Response (Bank 1 Sensor 1)",
    "P0134": "O2 Sensor Circuit No Activity Detected (Bank 1 Sensor 1)",
    "P0135": "O2 Sensor Heater Circuit Malfunction (Bank 1 Sensor 1)",
    "P0136": "O2 Sensor Circuit Malfunction (Bank 1 Sensor 2)",
    "P0137": "O2 Sensor Circuit Low Voltage (Bank 1 Sensor 2)",
    "P0138": "O2 Sensor Circuit High Voltage (Bank 1 Sensor 2)",
    "P0139": "O2 Sensor Circuit Slow Response (Bank 1 Sensor 2)",
    "P0140": "O2 Sensor Circuit No Activity Detected (Bank 1 Sensor 2)",
    "P0141": "O2 Sensor Heater Circuit Malfunction (Bank 1 Sensor 2)",
    "P0150": "O2 Sensor Circuit Malfunction (Bank 2 Sensor 1)",
    "P0151": "O2 Sensor Circuit Low Voltage (Bank 2 Sensor 1)",
    "P0152": "O2 Sensor Circuit High Voltage (Bank 2 Sensor 1)",
    "P0153": "O2 Sensor Circuit Slow Response (Bank 2 Sensor 1)",
    "P0154": "O2 Sensor Circuit No Activity Detected (Bank 2 Sensor 1)",
    "P0155": "O2 Sensor Heater Circuit Malfunction (Bank 2 Sensor 1)",
    "P0156": "O2 Sensor Circuit Malfunction (Bank 2 Sensor 2)",
    "P0157": "O2 Sensor Circuit Low Voltage (Bank 2 Sensor 2)",
    "P0158": "O2 Sensor Circuit High Voltage (Bank 2 Sensor 2)",
    "P0161": "O2 Sensor Heater Circuit Malfunction (Bank 2 Sensor 2)",
    "P0170": "Fuel Trim Malfunction (Bank 1)",
    "P0171": "System Too Lean (Bank 1)",
    "P0172": "System Too Rich (Bank 1)",
    "P0173": "Fuel Trim Malfunction (Bank 2)",
    "P0174": "System Too Lean (Bank 2)",
    "P0175": "System Too Rich (Bank 2)",
    "P0180": "Fuel Temperature Sensor A Circuit Malfunction",
    "P0190": "Fuel Rail Pressure Sensor Circuit Malfunction",
    "P0191": "Fuel Rail Pressure Sensor Circuit Range/Performance",
    "P0192": "Fuel Rail Pressure Sensor Circuit Low Input",
    "P0193": "Fuel Rail Pressure Sensor Circuit High Input",
    "P0200": "Injector Circuit Malfunction",
    "P0201": "Injector Circuit Malfunction - Cylinder 1",
    "P0202": "Injector Circuit Malfunction - Cylinder 2",
    "P0203": "Injector Circuit Malfunction - Cylinder 3",
    "P0204": "Injector Circuit Malfunction - Cylinder 4",
    "P0205": "Injector Circuit Malfunction - Cylinder 5",
    "P0206": "Injector Circuit Malfunction - Cylinder 6",
    "P0207": "Injector Circuit Malfunction - Cylinder 7",
    "P0208": "Injector Circuit Malfunction - Cylinder 8",
    "P0217": "Engine Overtemperature Condition",
    "P0218": "Transmission Over Temperature Condition",
    "P0219": "Engine Overspeed Condition",
    "P0220": "Throttle/Pedal Position Sensor/Switch B Circuit Malfunction",
    "P0221": "Throttle/Pedal Position Sensor/Switch B Circuit Range/Performance Problem",
    "P0222": "Throttle/Pedal Position Sensor/Switch B Circuit Low Input",
    "P0223": "Throttle/Pedal Position Sensor/Switch B Circuit High Input",
    "P0230": "Fuel Pump Primary Circuit Malfunction",
    "P0234": "Engine Overboost Condition",
    "P0299": "Turbo/Super Charger Underboost",
    # ignition system or misfire
    "P0300": "Random/Multiple Cylinder Misfire Detected",
    "P0301": "Cylinder 1 Misfire Detected",
    "P0302": "Cylinder 2 Misfire Detected",
    "P0303": "Cylinder 3 Misfire Detected",
    "P0304": "Cylinder 4 Misfire Detected",
    "P0305": "Cylinder 5 Misfire Detected",
    "P0306": "Cylinder 6 Misfire Detected",
    "P0307": "Cylinder 7 Misfire Detected",
    "P0308": "Cylinder 8 Misfire Detected",
    "P0309": "Cylinder 9 Misfire Detected",
    "P0310": "Cylinder 10 Misfire Detected",
    "P0311": "Cylinder 11 Misfire Detected",
    "P0312": "Cylinder 12 Misfire Detected",
    "P0316": "Misfire Detected on Startup (First 1000 Revolutions)",
    "P0320": "Ignition/Distributor Engine Speed Input Circuit Malfunction",
    "P0325": "Knock Sensor 1 Circuit Malfunction (Bank 1 or Single Sensor)",
    "P0326": "Knock Sensor 1 Circuit Range/Performance (Bank 1 or Single Sensor)",
    "P0327": "Knock Sensor 1 Circuit Low Input (Bank 1 or Single Sensor)",
    "P0328": "Knock Sensor 1 Circuit High Input (Bank 1 or Single Sensor)",
    "P0330": "Knock Sensor 2 Circuit Malfunction (Bank 2)",
    "P0335": "Crankshaft Position Sensor A Circuit Malfunction",
    "P0336": "Crankshaft Position Sensor A Circuit Range/Performance",
    "P0337": "Crankshaft Position Sensor A Circuit Low Input",
    "P0338": "Crankshaft Position Sensor A Circuit High Input",
    "P0340": "Camshaft Position Sensor Circuit Malfunction",
    "P0341": "Camshaft Position Sensor Circuit Range/Performance",
    "P0342": "Camshaft Position Sensor Circuit Low Input",
    "P0343": "Camshaft Position Sensor Circuit High Input",
    "P0351": "Ignition Coil A Primary/Secondary Circuit Malfunction",
    "P0352": "Ignition Coil B Primary/Secondary Circuit Malfunction",
    "P0353": "Ignition Coil C Primary/Secondary Circuit Malfunction",
    "P0354": "Ignition Coil D Primary/Secondary Circuit Malfunction",
    "P0380": "Glow Plug/Heater Circuit A Malfunction",
    # auxiliary emission controls
    "P0400": "Exhaust Gas Recirculation Flow Malfunction",
    "P0401": "Exhaust Gas Recirculation Flow Insufficient Detected",
    "P0402": "Exhaust Gas Recirculation Flow Excessive Detected",
    "P0403": "Exhaust Gas Recirculation Circuit Malfunction",
    "P0404": "Exhaust Gas Recirculation Circuit Range/Performance",
    "P0410": "Secondary Air Injection System Malfunction",
    "P0411": "Secondary Air Injection System Incorrect Flow Detected",
    "P0420": "Catalyst System Efficiency Below Threshold (Bank 1)",
    "P0421": "Warm Up Catalyst Efficiency Below Threshold (Bank 1)",
    "P0430": "Catalyst System Efficiency Below Threshold (Bank 2)",
    "P0431": "Warm Up Catalyst Efficiency Below Threshold (Bank 2)",
    "P0440": "Evaporative Emission Control System Malfunction",
    "P0441": "Evaporative Emission Control System Incorrect Purge Flow",
    "P0442": "Evaporative Emission Control System Leak Detected (small leak)",
    "P0443": "Evaporative Emission Control System Purge Control Valve Circuit Malfunction",
    "P0446": "Evaporative Emission Control System Vent Control Circuit Malfunction",
    "P0449": "Evaporative Emission Control System Vent Valve/Solenoid Circuit Malfunction",
    "P0451": "Evaporative Emission Control System Pressure Sensor Range/Performance",
    "P0452": "Evaporative Emission Control System Pressure Sensor Low Input",
    "P0453": "Evaporative Emission Control System Pressure Sensor High Input",
    "P0455": "Evaporative Emission Control System Leak Detected (gross leak)",
    "P0456": "Evaporative Emission Control System Leak Detected (very small leak)",
    "P0460": "Fuel Level Sensor Circuit Malfunction",
    "P0461": "Fuel Level Sensor Circuit Range/Performance",
    "P0462": "Fuel Level Sensor Circuit Low Input",
    "P0463": "Fuel Level Sensor Circuit High Input",
    "P0480": "Cooling Fan 1 Control Circuit Malfunction",
    "P0491": "Secondary Air Injection System (Bank 1)",
    "P0496": "Evaporative Emission System High Purge Flow",
    # vehicle speed, idle control
    "P0500": "Vehicle Speed Sensor Malfunction",
    "P0501": "Vehicle Speed Sensor Range/Performance",
    "P0503": "Vehicle Speed Sensor Intermittent/Erratic/High",
    "P0505": "Idle Control System Malfunction",
    "P0506": "Idle Control System RPM Lower Than Expected",
    "P0507": "Idle Control System RPM Higher Than Expected",
    "P0520": "Engine Oil Pressure Sensor/Switch Circuit Malfunction",
    "P0530": "A/C Refrigerant Pressure Sensor Circuit Malfunction",
    "P0560": "System Voltage Malfunction",
    "P0562": "System Voltage Low",
    "P0563": "System Voltage High",
    "P0571": "Cruise Control/Brake Switch A Circuit Malfunction",
    # computer output circuit
    "P0600": "Serial Communication Link Malfunction",
    "P0601": "Internal Control Module Memory Check Sum Error",
    "P0602": "Control Module Programming Error",
    "P0603": "Internal Control Module Keep Alive Memory (KAM) Error",
    "P0604": "Internal Control Module Random Access Memory (RAM) Error",
    "P0605": "Internal Control Module Read Only Memory (ROM) Error",
    "P0606": "PCM Processor Fault",
    "P0620": "Generator Control Circuit Malfunction",
    "P0622": "Generator Field F Control Circuit Malfunction",
    "P0641": "Sensor Reference Voltage A Circuit/Open",
    "P0650": "Malfunction Indicator Lamp (MIL) Control Circuit Malfunction",
    # transmission
    "P0700": "Transmission Control System Malfunction",
    "P0705": "Transmission Range Sensor Circuit Malfunction (PRNDL Input)",
    "P0710": "Transmission Fluid Temperature Sensor Circuit Malfunction",
    "P0715": "Input/Turbine Speed Sensor Circuit Malfunction",
    "P0720": "Output Speed Sensor Circuit Malfunction",
    "P0730": "Incorrect Gear Ratio",
    "P0740": "Torque Converter Clutch Circuit Malfunction",
    "P0750": "Shift Solenoid A Malfunction",
    "P0755": "Shift Solenoid B Malfunction",
    "P0760": "Shift Solenoid C Malfunction",
    # hybrid propulsion
    "P0A80": "Replace Hybrid Battery Pack",
    # chassis
    "C0035": "Left Front Wheel Speed Sensor Circuit",
    "C0040": "Right Front Wheel Speed Sensor Circuit",
    "C0045": "Left Rear Wheel Speed Sensor Circuit",
    "C0050": "Right Rear Wheel Speed Sensor Circuit",
    "C0060": "Left Front ABS Solenoid #1 Circuit Malfunction",
    "C0110": "Pump Motor Circuit Malfunction",
    "C0265": "EBCM Motor Relay Circuit Low When On",
    # body
    "B0001": "Driver Frontal Stage 1 Deployment Control",
    "B0002": "Driver Frontal Stage 2 Deployment Control",
    "B0010": "Passenger Frontal Stage 1 Deployment Control",
    "B0100": "Electronic Frontal Sensor 1",
    # network
    "U0001": "High Speed CAN Communication Bus",
    "U0073": "Control Module Communication Bus Off",
    "U0100": "Lost Communication With ECM/PCM A",
    "U0101": "Lost Communication With TCM",
    "U0121": "Lost Communication With Anti-Lock Brake System (ABS) Control Module",
    "U0140": "Lost Communication With Body Control Module",
    "U0155": "Lost Communication With Instrument Panel Cluster (IPC) Control Module",
    "U0401": "Invalid Data Received From ECM/PCM A",
})
