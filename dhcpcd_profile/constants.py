# dhcpcd_profile/constants.py
"""Fixed names and defaults used when rewriting dhcpcd profiles."""

DEFAULT_CONFIG_PATH = '/etc/dhcpcd.conf'

# `dhcpcd -U <iface>` dumps the lease variables of an interface
DHCPCD_COMMAND = 'dhcpcd'
DUMP_FLAG = '-U'

PROFILE_PREFIX = 'profile '
STATIC_PREFIX = 'static '

# Lease variables copied into the profile block
SELECTED_VARIABLES = frozenset({
    'broadcast_address',
    'domain_name_servers',
    'ip_address',
    'routers',
    'subnet_cidr',
})
