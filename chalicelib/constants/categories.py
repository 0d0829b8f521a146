CATEGORY_TYPES = ('food', 'medicine', 'appliance', 'document', 'service')

CATEGORIES = (
    # Food
    {'name': 'Fast Food', 'type': 'food', 'description': 'Hambúrgueres, batatas fritas, refrigerantes, etc.'},
    {'name': 'Churrascaria', 'type': 'food', 'description': 'Carnes grelhadas, espetinhos, etc.'},
    {'name': 'Comida Moçambicana', 'type': 'food', 'description': 'Matapa, xiguinha, frango à zambeziana, etc.'},
    {'name': 'Comida Chinesa', 'type': 'food', 'description': 'Arroz chop suey, yakisoba, frango xadrez, etc.'},
    {'name': 'Comida Italiana', 'type': 'food', 'description': 'Massas, pizzas, risotos e sobremesas italianas.'},
    {'name': 'Vegetariana', 'type': 'food', 'description': 'Pratos sem carne animal.'},
    {'name': 'Vegana', 'type': 'food', 'description': 'Sem ingredientes de origem animal.'},
    {'name': 'Mariscos', 'type': 'food', 'description': 'Camarão, caranguejo, lula e outros frutos do mar.'},
    {'name': 'Doces e Sobremesas', 'type': 'food', 'description': 'Bolos, gelados, pudins e sobremesas.'},
    {'name': 'Bebidas', 'type': 'food', 'description': 'Sumos, refrigerantes, águas e bebidas alcoólicas.'},
    {'name': 'Pequeno-almoço', 'type': 'food', 'description': 'Café, pão, ovos, croissants, etc.'},

    # Medicine
    {'name': 'Analgésicos', 'type': 'medicine', 'description': 'Medicamentos para dor: paracetamol, ibuprofeno.'},
    {'name': 'Antibióticos', 'type': 'medicine',
     'description': 'Tratamento de infecções: amoxicilina, azitromicina.'},
    {'name': 'Vitaminas e Suplementos', 'type': 'medicine',
     'description': 'Vitaminas, minerais e suplementos alimentares.'},
    {'name': 'Cuidados com a Pele', 'type': 'medicine', 'description': 'Protetor solar, cremes e loções.'},
    {'name': 'Higiene Pessoal', 'type': 'medicine',
     'description': 'Sabonetes, desodorantes, fraldas, pastas de dentes.'},
    {'name': 'Produtos para Bebés', 'type': 'medicine',
     'description': 'Shampoo, lenços, fraldas e cremes para bebé.'},
    {'name': 'Produtos Femininos', 'type': 'medicine', 'description': 'Absorventes, anticoncepcionais, cosméticos.'},
    {'name': 'Equipamentos Médicos', 'type': 'medicine',
     'description': 'Termómetros, tensiómetros, inaladores, etc.'},

    # Appliance
    {'name': 'Cozinha', 'type': 'appliance', 'description': 'Fogões, micro-ondas, liquidificadores, etc.'},
    {'name': 'Lavanderia', 'type': 'appliance', 'description': 'Máquinas de lavar, ferros de passar, cestos.'},
    {'name': 'Cuidados Pessoais', 'type': 'appliance', 'description': 'Barbeadores, escovas elétricas, secadores.'},
    {'name': 'TV & Áudio', 'type': 'appliance', 'description': 'Televisores, colunas de som, rádios.'},
    {'name': 'Computadores & Acessórios', 'type': 'appliance', 'description': 'Laptops, teclados, mouses, webcams.'},
    {'name': 'Telemóveis & Tablets', 'type': 'appliance', 'description': 'Smartphones, carregadores, fones, capas.'},
    {'name': 'Energia', 'type': 'appliance', 'description': 'UPS, painéis solares, extensões e tomadas.'},

    # Document
    {'name': 'Documentos Pessoais', 'type': 'document',
     'description': 'BI, NUIT, passaportes, certificados pessoais.'},
    {'name': 'Documentos Empresariais', 'type': 'document',
     'description': 'Contratos, alvarás, processos comerciais.'},
    {'name': 'Certidões', 'type': 'document', 'description': 'Certidões de nascimento, casamento e óbito.'},
    {'name': 'Notificações', 'type': 'document', 'description': 'Notificações legais e judiciais.'},
    {'name': 'Correspondência Geral', 'type': 'document',
     'description': 'Cartas, envelopes, faturas e pacotes leves.'},

    # Service
    {'name': 'Reparação de Equipamentos', 'type': 'service',
     'description': 'Conserto de eletrônicos, eletrodomésticos.'},
    {'name': 'Entregas Expressas', 'type': 'service',
     'description': 'Entrega rápida de qualquer item pessoal ou comercial.'},
    {'name': 'Mudanças e Transporte', 'type': 'service',
     'description': 'Carregamento e transporte de volumes pesados.'},
    {'name': 'Manutenção Residencial', 'type': 'service',
     'description': 'Canalização, eletricidade, pintura e reparos.'},
    {'name': 'Lavagem de Carros', 'type': 'service', 'description': 'Serviços de car wash em domicílio.'},
    {'name': 'Consultas Médicas ao Domicílio', 'type': 'service',
     'description': 'Profissional de saúde vai até o paciente.'},
)
