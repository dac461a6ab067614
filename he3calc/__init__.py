"""He-3 Spin Filter Calculator — He-3 decay, neutron polarization, transmission and FOM."""
