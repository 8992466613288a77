# Estados de membresía del cliente
ESTADO_ACTIVO = "ACTIVE"
ESTADO_CANCELADO = "CANCELLED"
ESTADO_PENDIENTE = "PENDING"

ESTADOS_CLIENTE = (ESTADO_ACTIVO, ESTADO_CANCELADO, ESTADO_PENDIENTE)

# Roles emitidos en el token
ROL_ADMIN = "admin"
ROL_CLIENTE = "cliente"

# Grupo de clientes sin punto de recogida
SIN_UBICACION = "SIN_UBICACION"
SIN_UBICACION_NOMBRE = "Sin ubicación asignada"

# Huacales
EXTRAS_SI = "Sí"
EXTRAS_NO = "No"
HUACAL_PENDIENTE = "Pendiente"
