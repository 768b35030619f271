from sqlalchemy import Column, Integer, String, DateTime, Numeric
from sqlalchemy.sql import func
from app.config.database import Base

class ReplicaMixin:
    """Columnas de control de la carga desde Sankhya"""
    company_id = Column("ID_SISTEMA", Integer, primary_key=True)
    is_current = Column("SANKHYA_ATUAL", String(1), default='S', nullable=False)
    last_load_at = Column("DT_ULT_CARGA", DateTime, server_default=func.current_timestamp())

# ===== CADASTROS =====

class Product(ReplicaMixin, Base):
    """Producto de la réplica - AS_PRODUTOS"""
    __tablename__ = "AS_PRODUTOS"

    code = Column("CODPROD", Integer, primary_key=True)
    description = Column("DESCRPROD", String(255), nullable=False)
    active = Column("ATIVO", String(1), default='S')
    local = Column("LOCAL", String(100))
    brand = Column("MARCA", String(100))
    characteristics = Column("CARACTERISTICAS", String(255))
    unit = Column("UNIDADE", String(10))
    list_price = Column("VLRCOMERC", Numeric(15, 2), default=0)
    created_at = Column("DT_CRIACAO", DateTime, server_default=func.current_timestamp())

class Partner(ReplicaMixin, Base):
    """Parceiro (cliente) de la réplica - AS_PARCEIROS"""
    __tablename__ = "AS_PARCEIROS"

    code = Column("CODPARC", Integer, primary_key=True)
    name = Column("NOMEPARC", String(255), nullable=False)
    tax_id = Column("CGC_CPF", String(20))
    city_code = Column("CODCID", Integer)
    active = Column("ATIVO", String(1), default='S')
    person_type = Column("TIPPESSOA", String(1))
    legal_name = Column("RAZAOSOCIAL", String(255))
    state_registration = Column("IDENTINSCESTAD", String(30))
    zip_code = Column("CEP", String(10))
    address_code = Column("CODEND", Integer)
    address_number = Column("NUMEND", String(10))
    complement = Column("COMPLEMENTO", String(100))
    district_code = Column("CODBAI", Integer)
    latitude = Column("LATITUDE", String(30))
    longitude = Column("LONGITUDE", String(30))
    is_customer = Column("CLIENTE", String(1), default='S')
    salesperson_code = Column("CODVEND", Integer, index=True)

class Salesperson(ReplicaMixin, Base):
    """Vendedor/gerente de la réplica - AS_VENDEDORES"""
    __tablename__ = "AS_VENDEDORES"

    code = Column("CODVEND", Integer, primary_key=True)
    nickname = Column("APELIDO", String(15), nullable=False)
    kind = Column("TIPVEND", String(1), nullable=False)  # 'G' gerente, 'V' vendedor
    active = Column("ATIVO", String(1), default='S')
    manager_code = Column("CODGER", Integer)

# ===== ESTOQUE Y PRECIOS =====

class Stock(ReplicaMixin, Base):
    """Saldo de estoque por local - AS_ESTOQUES"""
    __tablename__ = "AS_ESTOQUES"

    product_code = Column("CODPROD", Integer, primary_key=True)
    location_code = Column("CODLOCAL", Integer, primary_key=True)
    quantity = Column("ESTOQUE", Numeric(15, 3), default=0)
    reserved = Column("RESERVADO", Numeric(15, 3), default=0)

class PriceTable(ReplicaMixin, Base):
    """Tabla de precios - AS_TABELA_PRECOS"""
    __tablename__ = "AS_TABELA_PRECOS"

    number = Column("NUTAB", Integer, primary_key=True)
    table_code = Column("CODTAB", Integer, nullable=False)
    valid_from = Column("DTVIGOR", DateTime)
    percentage = Column("PERCENTUAL", Numeric(7, 2))

class PriceException(ReplicaMixin, Base):
    """Precio de producto en tabla - AS_EXCECAO_PRECO"""
    __tablename__ = "AS_EXCECAO_PRECO"

    product_code = Column("CODPROD", Integer, primary_key=True)
    table_number = Column("NUTAB", Integer, primary_key=True)
    price = Column("VLRVENDA", Numeric(15, 2), nullable=False)

# ===== FINANCEIRO =====

class Receivable(ReplicaMixin, Base):
    """Título financiero - AS_FINANCEIRO"""
    __tablename__ = "AS_FINANCEIRO"

    number = Column("NUFIN", Integer, primary_key=True)
    partner_code = Column("CODPARC", Integer, nullable=False, index=True)
    amount = Column("VLRDESDOB", Numeric(15, 2), nullable=False)
    due_date = Column("DTVENC", DateTime)
    negotiation_date = Column("DTNEG", DateTime)
    financial_type = Column("CODTIPTIT", String(50))
    installment = Column("DESDOBRAMENTO", Integer, default=1)
    direction = Column("RECDESP", Integer, default=1)  # 1 receber, -1 pagar
    settled_at = Column("DHBAIXA", DateTime)
