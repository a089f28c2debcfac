from dhcpcd_profile import ConfigDocument, read_lease_dump

# Interface to read the lease from and the profile to overwrite
INTERFACE = 'wlan0'
PROFILE = 'home'

# Write to a copy so the live configuration stays untouched
CONFIG_FILE = '/etc/dhcpcd.conf'
OUTPUT_FILE = '/tmp/dhcpcd.conf'

# Selected lease variables reported by 'dhcpcd -U wlan0'
variables = read_lease_dump(INTERFACE)

document = ConfigDocument.from_file(CONFIG_FILE)

# Show what the profile holds before the update
print(f"Before: {document.get_static_values(PROFILE)}")

# Remove the old block and append a fresh one at the end of the document
change = document.replace_profile(PROFILE, variables)
print(f"{change.summary()} [{change.change_id}]")

document.write_to_file(OUTPUT_FILE)
print(f"After: {ConfigDocument.from_file(OUTPUT_FILE).get_static_values(PROFILE)}")
