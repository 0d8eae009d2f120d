"""
Bundled exercise library loaded by the seed endpoint and at startup.

Ids are stable slugs; plans reference them through `exerciseId`.
"""

EXERCISE_LIBRARY = [
    {
        "id": "bench_step_up",
        "name": "Bench Step-Up",
        "name_pt": "Step-Up no Banco",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "glutes"],
        "secondary_muscles": ["hamstrings", "calves", "core"],
        "equipment": "bench",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/04/dumbbell-step-up.gif",
        "video_url": "https://www.youtube.com/watch?v=dQqApCGd5Ss",
        "instructions": "Step onto bench with one foot, drive through heel to stand tall, lower with control. Alternate legs or complete all reps on one side.",
        "instructions_pt": "Suba no banco com um pé, empurre pelo calcanhar para ficar em pé, desça com controlo. Alterne as pernas ou complete todas as repetições de um lado.",
    },
    {
        "id": "bench_hip_thrust",
        "name": "Bench Hip Thrust",
        "name_pt": "Hip Thrust no Banco",
        "category": "Strength",
        "primary_muscles": ["glutes", "hamstrings"],
        "secondary_muscles": ["core", "quadriceps"],
        "equipment": "bench",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/barbell-hip-thrust.gif",
        "video_url": "https://www.youtube.com/watch?v=SEdqd1n0cvg",
        "instructions": "Sit with upper back against bench edge, feet flat on floor. Drive hips up until body forms straight line, squeeze glutes at top, lower slowly.",
        "instructions_pt": "Sente com a parte superior das costas contra a borda do banco, pés apoiados no chão. Eleve os quadris até formar uma linha reta, aperte os glúteos no topo, desça lentamente.",
    },
    {
        "id": "bench_tricep_dip",
        "name": "Bench Tricep Dip",
        "name_pt": "Tricep Dip no Banco",
        "category": "Strength",
        "primary_muscles": ["triceps"],
        "secondary_muscles": ["shoulders", "chest"],
        "equipment": "bench",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/bench-dips.gif",
        "video_url": "https://www.youtube.com/watch?v=0326dy_-CzM",
        "instructions": "Place hands on bench behind you, legs extended. Lower body by bending elbows to 90 degrees, push back up. Keep elbows close to body.",
        "instructions_pt": "Coloque as mãos no banco atrás de você, pernas estendidas. Baixe o corpo dobrando os cotovelos a 90 graus, empurre para cima. Mantenha os cotovelos perto do corpo.",
    },
    {
        "id": "bench_box_jump",
        "name": "Bench Box Jump",
        "name_pt": "Salto no Banco",
        "category": "Cardio",
        "primary_muscles": ["quadriceps", "glutes"],
        "secondary_muscles": ["calves", "hamstrings", "core"],
        "equipment": "bench",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/05/box-jump.gif",
        "video_url": "https://www.youtube.com/watch?v=52r_Ul5k03g",
        "instructions": "Stand facing bench, swing arms and jump onto bench landing softly with bent knees. Step down and repeat.",
        "instructions_pt": "Fique de frente para o banco, balance os braços e salte para o banco aterrissando suavemente com os joelhos dobrados. Desça e repita.",
    },
    {
        "id": "single_leg_squat_bench",
        "name": "Single Leg Squat to Bench",
        "name_pt": "Agachamento Unilateral no Banco",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "glutes"],
        "secondary_muscles": ["hamstrings", "core"],
        "equipment": "bench",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/11/single-leg-squat.gif",
        "video_url": "https://www.youtube.com/watch?v=P8kFkpOoqvs",
        "instructions": "Stand on one leg in front of bench. Lower until you gently touch bench, then stand back up. Keep non-working leg forward.",
        "instructions_pt": "Fique em um pé na frente do banco. Desça até tocar suavemente o banco, depois levante-se. Mantenha a perna que não trabalha à frente.",
    },
    {
        "id": "bench_reverse_hyper",
        "name": "Bench Reverse Hyperextension",
        "name_pt": "Hiperextensão Reversa no Banco",
        "category": "Strength",
        "primary_muscles": ["glutes", "hamstrings"],
        "secondary_muscles": ["back", "core"],
        "equipment": "bench",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/reverse-hyperextension.gif",
        "video_url": "https://www.youtube.com/watch?v=5_bV9dZbMOc",
        "instructions": "Lie face down on bench with hips at edge, legs hanging. Raise legs until level with body, squeeze glutes, lower with control.",
        "instructions_pt": "Deite de bruços no banco com os quadris na borda, pernas penduradas. Eleve as pernas até ficarem niveladas com o corpo, aperte os glúteos, desça com controlo.",
    },
    {
        "id": "dumbbell_goblet_squat",
        "name": "Dumbbell Goblet Squat",
        "name_pt": "Agachamento Cálice com Haltere",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "glutes"],
        "secondary_muscles": ["hamstrings", "core"],
        "equipment": "dumbbell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/04/dumbbell-goblet-squat.gif",
        "video_url": "https://www.youtube.com/watch?v=MeIiIdhvXT4",
        "instructions": "Hold dumbbell vertically at chest with both hands. Squat down keeping chest up, drive through heels to stand.",
        "instructions_pt": "Segure o haltere verticalmente no peito com as duas mãos. Agache mantendo o peito erguido, empurre pelos calcanhares para levantar.",
    },
    {
        "id": "dumbbell_deadlift",
        "name": "Dumbbell Deadlift",
        "name_pt": "Levantamento Terra com Halteres",
        "category": "Strength",
        "primary_muscles": ["glutes", "hamstrings", "back"],
        "secondary_muscles": ["core", "quadriceps"],
        "equipment": "dumbbell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/06/dumbbell-deadlift.gif",
        "video_url": "https://www.youtube.com/watch?v=lJ3QwaXNJfw",
        "instructions": "Hold dumbbells at sides, hinge at hips keeping back flat, lower weights along legs, drive hips forward to stand.",
        "instructions_pt": "Segure halteres nas laterais, curve nos quadris mantendo as costas retas, baixe os pesos ao longo das pernas, empurre os quadris para frente para levantar.",
    },
    {
        "id": "dumbbell_pullover",
        "name": "Dumbbell Pullover",
        "name_pt": "Pullover com Haltere",
        "category": "Strength",
        "primary_muscles": ["chest", "back"],
        "secondary_muscles": ["triceps", "core"],
        "equipment": "dumbbell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/dumbbell-pullover.gif",
        "video_url": "https://www.youtube.com/watch?v=FK4rHfWKEac",
        "instructions": "Lie on bench, hold dumbbell with both hands above chest. Lower weight behind head with slight elbow bend, pull back to start.",
        "instructions_pt": "Deite no banco, segure o haltere com as duas mãos acima do peito. Baixe o peso atrás da cabeça com leve flexão do cotovelo, puxe de volta ao início.",
    },
    {
        "id": "dumbbell_renegade_row",
        "name": "Dumbbell Renegade Row",
        "name_pt": "Remada Renegada com Halteres",
        "category": "Strength",
        "primary_muscles": ["back", "core"],
        "secondary_muscles": ["biceps", "shoulders", "chest"],
        "equipment": "dumbbell",
        "difficulty": "advanced",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/dumbbell-renegade-row.gif",
        "video_url": "https://www.youtube.com/watch?v=GS1RCR2mHJY",
        "instructions": "Start in push-up position gripping dumbbells. Row one dumbbell to hip while balancing, lower and repeat other side.",
        "instructions_pt": "Comece na posição de flexão segurando halteres. Reme um haltere até à anca enquanto equilibra, desça e repita do outro lado.",
    },
    {
        "id": "dumbbell_skull_crusher",
        "name": "Dumbbell Skull Crusher",
        "name_pt": "Tríceps Testa com Halteres",
        "category": "Strength",
        "primary_muscles": ["triceps"],
        "secondary_muscles": ["shoulders"],
        "equipment": "dumbbell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/dumbbell-skull-crusher.gif",
        "video_url": "https://www.youtube.com/watch?v=ir5PsbniVSc",
        "instructions": "Lie on bench with dumbbells extended above chest. Bend elbows to lower weights toward forehead, extend back up.",
        "instructions_pt": "Deite no banco com halteres estendidos acima do peito. Flexione os cotovelos para baixar os pesos em direção à testa, estenda de volta.",
    },
    {
        "id": "dumbbell_reverse_fly",
        "name": "Dumbbell Reverse Fly",
        "name_pt": "Crucifixo Inverso com Halteres",
        "category": "Strength",
        "primary_muscles": ["shoulders", "back"],
        "secondary_muscles": ["trapezius"],
        "equipment": "dumbbell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/dumbbell-reverse-fly.gif",
        "video_url": "https://www.youtube.com/watch?v=T8xgsuRT2F0",
        "instructions": "Bend at hips, let dumbbells hang. Raise arms out to sides squeezing shoulder blades together, lower with control.",
        "instructions_pt": "Curve nos quadris, deixe os halteres pendurados. Eleve os braços para os lados apertando as omoplatas, desça com controlo.",
    },
    {
        "id": "dumbbell_concentration_curl",
        "name": "Dumbbell Concentration Curl",
        "name_pt": "Rosca Concentrada com Haltere",
        "category": "Strength",
        "primary_muscles": ["biceps"],
        "secondary_muscles": ["forearms"],
        "equipment": "dumbbell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/03/concentration-curl.gif",
        "video_url": "https://www.youtube.com/watch?v=Jvj2wV0vOYU",
        "instructions": "Sit on bench, brace elbow against inner thigh. Curl weight toward shoulder, lower slowly. Focus on bicep contraction.",
        "instructions_pt": "Sente no banco, apoie o cotovelo contra a coxa interna. Curl o peso em direção ao ombro, desça lentamente. Foque na contração do bíceps.",
    },
    {
        "id": "dumbbell_upright_row",
        "name": "Dumbbell Upright Row",
        "name_pt": "Remada Alta com Halteres",
        "category": "Strength",
        "primary_muscles": ["shoulders", "trapezius"],
        "secondary_muscles": ["biceps"],
        "equipment": "dumbbell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/dumbbell-upright-row.gif",
        "video_url": "https://www.youtube.com/watch?v=amCU-ziHITM",
        "instructions": "Stand holding dumbbells in front of thighs. Pull weights up along body to chest height, elbows leading, lower slowly.",
        "instructions_pt": "Fique em pé segurando halteres na frente das coxas. Puxe os pesos para cima ao longo do corpo até a altura do peito, cotovelos liderando, desça lentamente.",
    },
    {
        "id": "dumbbell_shrug",
        "name": "Dumbbell Shrug",
        "name_pt": "Encolhimento de Ombros com Halteres",
        "category": "Strength",
        "primary_muscles": ["trapezius"],
        "secondary_muscles": ["shoulders"],
        "equipment": "dumbbell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/dumbbell-shrug.gif",
        "video_url": "https://www.youtube.com/watch?v=cJRVVxmytaM",
        "instructions": "Stand holding heavy dumbbells at sides. Shrug shoulders up toward ears, hold briefly, lower slowly.",
        "instructions_pt": "Fique em pé segurando halteres pesados nas laterais. Encolha os ombros em direção às orelhas, segure brevemente, desça lentamente.",
    },
    {
        "id": "dumbbell_sumo_squat",
        "name": "Dumbbell Sumo Squat",
        "name_pt": "Agachamento Sumo com Haltere",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "glutes", "adductors"],
        "secondary_muscles": ["hamstrings", "core"],
        "equipment": "dumbbell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/03/dumbbell-sumo-squat.gif",
        "video_url": "https://www.youtube.com/watch?v=9ZuXKqRbT9k",
        "instructions": "Stand with wide stance, toes pointed out, hold dumbbell between legs. Squat down keeping chest up, drive through heels.",
        "instructions_pt": "Fique com postura ampla, dedos apontando para fora, segure haltere entre as pernas. Agache mantendo o peito erguido, empurre pelos calcanhares.",
    },
    {
        "id": "dumbbell_thruster",
        "name": "Dumbbell Thruster",
        "name_pt": "Thruster com Halteres",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "shoulders", "glutes"],
        "secondary_muscles": ["triceps", "core"],
        "equipment": "dumbbell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/11/dumbbell-thruster.gif",
        "video_url": "https://www.youtube.com/watch?v=gU-b1VxWNhY",
        "instructions": "Hold dumbbells at shoulders, squat down. Drive up explosively and press weights overhead in one fluid motion.",
        "instructions_pt": "Segure halteres nos ombros, agache. Empurre explosivamente e pressione os pesos acima da cabeça num movimento fluido.",
    },
    {
        "id": "dumbbell_calf_raise",
        "name": "Dumbbell Calf Raise",
        "name_pt": "Elevação de Panturrilha com Halteres",
        "category": "Strength",
        "primary_muscles": ["calves"],
        "secondary_muscles": [],
        "equipment": "dumbbell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/single-leg-calf-raise.gif",
        "video_url": "https://www.youtube.com/watch?v=c5Kv6-fnTj8",
        "instructions": "Hold dumbbells at sides, stand on edge of step. Raise heels as high as possible, lower below step level for stretch.",
        "instructions_pt": "Segure halteres nas laterais, fique na borda de um degrau. Eleve os calcanhares o máximo possível, desça abaixo do nível do degrau para alongar.",
    },
    {
        "id": "dumbbell_walking_lunge",
        "name": "Dumbbell Walking Lunge",
        "name_pt": "Passada em Caminhada com Halteres",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "glutes"],
        "secondary_muscles": ["hamstrings", "core"],
        "equipment": "dumbbell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/11/dumbbell-walking-lunges.gif",
        "video_url": "https://www.youtube.com/watch?v=L8fvypPrzzs",
        "instructions": "Hold dumbbells at sides. Step forward into lunge, lower back knee toward ground, push through front heel to step into next lunge.",
        "instructions_pt": "Segure halteres nas laterais. Passo à frente em afundo, baixe o joelho de trás em direção ao chão, empurre pelo calcanhar da frente para o próximo afundo.",
    },
    {
        "id": "dumbbell_arnold_press",
        "name": "Dumbbell Arnold Press",
        "name_pt": "Arnold Press com Halteres",
        "category": "Strength",
        "primary_muscles": ["shoulders"],
        "secondary_muscles": ["triceps", "trapezius"],
        "equipment": "dumbbell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/arnold-press.gif",
        "video_url": "https://www.youtube.com/watch?v=6Z15_WdXmVw",
        "instructions": "Start with dumbbells at chest, palms facing you. Rotate wrists outward while pressing overhead, reverse on descent.",
        "instructions_pt": "Comece com halteres no peito, palmas viradas para você. Gire os pulsos para fora enquanto pressiona para cima, inverta na descida.",
    },
    {
        "id": "kettlebell_turkish_getup",
        "name": "Kettlebell Turkish Get-Up",
        "name_pt": "Levantamento Turco com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["core", "shoulders"],
        "secondary_muscles": ["glutes", "quadriceps", "back"],
        "equipment": "kettlebell",
        "difficulty": "advanced",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/turkish-get-up.gif",
        "video_url": "https://www.youtube.com/watch?v=0bWRPC6-bWE",
        "instructions": "Lie on back holding kettlebell overhead. Stand up through a series of movements keeping arm locked out, then reverse.",
        "instructions_pt": "Deite de costas segurando o kettlebell acima. Levante-se através de uma série de movimentos mantendo o braço travado, depois inverta.",
    },
    {
        "id": "kettlebell_clean",
        "name": "Kettlebell Clean",
        "name_pt": "Clean com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["shoulders", "back"],
        "secondary_muscles": ["core", "legs"],
        "equipment": "kettlebell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/kettlebell-clean.gif",
        "video_url": "https://www.youtube.com/watch?v=mwIvCdQ3eXA",
        "instructions": "Start with kettlebell between legs. Explosively pull to rack position at shoulder, rotating wrist to avoid slamming arm.",
        "instructions_pt": "Comece com kettlebell entre as pernas. Puxe explosivamente para posição rack no ombro, girando o pulso para evitar bater no braço.",
    },
    {
        "id": "kettlebell_snatch",
        "name": "Kettlebell Snatch",
        "name_pt": "Snatch com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["shoulders", "back", "glutes"],
        "secondary_muscles": ["core", "hamstrings"],
        "equipment": "kettlebell",
        "difficulty": "advanced",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/kettlebell-snatch.gif",
        "video_url": "https://www.youtube.com/watch?v=nYP9Vq2JnEI",
        "instructions": "Swing kettlebell between legs, explosively drive hips and pull weight overhead in one motion, punch through at top.",
        "instructions_pt": "Balance o kettlebell entre as pernas, empurre explosivamente os quadris e puxe o peso acima da cabeça num movimento, soque no topo.",
    },
    {
        "id": "kettlebell_windmill",
        "name": "Kettlebell Windmill",
        "name_pt": "Moinho com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["core", "shoulders"],
        "secondary_muscles": ["hamstrings", "glutes", "back"],
        "equipment": "kettlebell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/kettlebell-windmill.gif",
        "video_url": "https://www.youtube.com/watch?v=iEfvlhVsGNw",
        "instructions": "Hold kettlebell overhead, feet angled. Hinge at hip pushing it back, reach opposite hand toward ground, keep eyes on weight.",
        "instructions_pt": "Segure kettlebell acima da cabeça, pés angulados. Curve no quadril empurrando-o para trás, alcance a mão oposta em direção ao chão, mantenha os olhos no peso.",
    },
    {
        "id": "kettlebell_high_pull",
        "name": "Kettlebell High Pull",
        "name_pt": "Puxada Alta com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["shoulders", "back"],
        "secondary_muscles": ["core", "glutes", "hamstrings"],
        "equipment": "kettlebell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/kettlebell-high-pull.gif",
        "video_url": "https://www.youtube.com/watch?v=k9aW0mCbksk",
        "instructions": "Swing kettlebell, at top of swing pull elbow back and up bringing weight to shoulder height, let it fall back to swing.",
        "instructions_pt": "Balance o kettlebell, no topo do balanço puxe o cotovelo para trás e para cima trazendo o peso à altura do ombro, deixe cair de volta ao balanço.",
    },
    {
        "id": "kettlebell_halo",
        "name": "Kettlebell Halo",
        "name_pt": "Halo com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["shoulders", "core"],
        "secondary_muscles": ["triceps", "back"],
        "equipment": "kettlebell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/kettlebell-halo.gif",
        "video_url": "https://www.youtube.com/watch?v=UcJf1_A3mSM",
        "instructions": "Hold kettlebell upside down at chest. Circle it around your head keeping elbows close, alternate directions.",
        "instructions_pt": "Segure kettlebell de cabeça para baixo no peito. Circule-o ao redor da cabeça mantendo os cotovelos perto, alterne as direções.",
    },
    {
        "id": "kettlebell_sumo_deadlift",
        "name": "Kettlebell Sumo Deadlift",
        "name_pt": "Levantamento Terra Sumo com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["glutes", "quadriceps", "hamstrings"],
        "secondary_muscles": ["back", "core"],
        "equipment": "kettlebell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/06/kettlebell-sumo-deadlift.gif",
        "video_url": "https://www.youtube.com/watch?v=UKt7VqZ-hWg",
        "instructions": "Stand with wide stance, kettlebell between legs. Hinge at hips, grip kettlebell, drive through heels to stand.",
        "instructions_pt": "Fique com postura ampla, kettlebell entre as pernas. Curve nos quadris, agarre o kettlebell, empurre pelos calcanhares para levantar.",
    },
    {
        "id": "kettlebell_figure_8",
        "name": "Kettlebell Figure 8",
        "name_pt": "Oito com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["core", "back"],
        "secondary_muscles": ["shoulders", "glutes"],
        "equipment": "kettlebell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/kettlebell-figure-8.gif",
        "video_url": "https://www.youtube.com/watch?v=yS5M-1qBIVc",
        "instructions": "Stand in partial squat, pass kettlebell between legs in figure-8 pattern, alternating hands front and back.",
        "instructions_pt": "Fique em agachamento parcial, passe o kettlebell entre as pernas em padrão de oito, alternando as mãos na frente e atrás.",
    },
    {
        "id": "kettlebell_single_leg_dl",
        "name": "Kettlebell Single Leg Deadlift",
        "name_pt": "Levantamento Terra Unilateral com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["hamstrings", "glutes"],
        "secondary_muscles": ["core", "back"],
        "equipment": "kettlebell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/06/single-leg-romanian-deadlift.gif",
        "video_url": "https://www.youtube.com/watch?v=Eh-w1fDRD0o",
        "instructions": "Stand on one leg holding kettlebell. Hinge forward letting back leg rise, touch kettlebell toward ground, return upright.",
        "instructions_pt": "Fique em uma perna segurando kettlebell. Curve para frente deixando a perna de trás subir, toque o kettlebell em direção ao chão, retorne ereto.",
    },
    {
        "id": "kettlebell_thruster",
        "name": "Kettlebell Thruster",
        "name_pt": "Thruster com Kettlebell",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "shoulders", "glutes"],
        "secondary_muscles": ["triceps", "core"],
        "equipment": "kettlebell",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/11/kettlebell-thruster.gif",
        "video_url": "https://www.youtube.com/watch?v=QDGrP1GfVnU",
        "instructions": "Hold kettlebell at shoulder in rack position. Squat down, drive up explosively pressing weight overhead.",
        "instructions_pt": "Segure kettlebell no ombro em posição rack. Agache, empurre explosivamente pressionando o peso acima da cabeça.",
    },
    {
        "id": "kettlebell_farmer_carry",
        "name": "Kettlebell Farmer Carry",
        "name_pt": "Farmer Carry com Kettlebells",
        "category": "Strength",
        "primary_muscles": ["core", "forearms"],
        "secondary_muscles": ["shoulders", "trapezius", "back"],
        "equipment": "kettlebell",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/farmers-carry.gif",
        "video_url": "https://www.youtube.com/watch?v=nHEnw8uJKzI",
        "instructions": "Hold heavy kettlebells at sides. Walk with controlled steps, keeping core tight and shoulders back.",
        "instructions_pt": "Segure kettlebells pesados nas laterais. Caminhe com passos controlados, mantendo o core apertado e os ombros para trás.",
    },
    {
        "id": "stability_ball_pike",
        "name": "Stability Ball Pike",
        "name_pt": "Pike na Bola de Estabilidade",
        "category": "Strength",
        "primary_muscles": ["core", "shoulders"],
        "secondary_muscles": ["chest", "back"],
        "equipment": "stability ball",
        "difficulty": "advanced",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/stability-ball-pike.gif",
        "video_url": "https://www.youtube.com/watch?v=WxE7LEPehbg",
        "instructions": "Start in push-up position with feet on ball. Pike hips up rolling ball toward hands, lower with control.",
        "instructions_pt": "Comece na posição de flexão com os pés na bola. Eleve os quadris rolando a bola em direção às mãos, desça com controlo.",
    },
    {
        "id": "stability_ball_jackknife",
        "name": "Stability Ball Jackknife",
        "name_pt": "Jackknife na Bola de Estabilidade",
        "category": "Strength",
        "primary_muscles": ["core"],
        "secondary_muscles": ["hip flexors", "shoulders"],
        "equipment": "stability ball",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/stability-ball-jackknife.gif",
        "video_url": "https://www.youtube.com/watch?v=rjmJWMp3FKU",
        "instructions": "Start in push-up position with shins on ball. Pull knees toward chest rolling ball forward, extend back.",
        "instructions_pt": "Comece na posição de flexão com as canelas na bola. Puxe os joelhos em direção ao peito rolando a bola para frente, estenda de volta.",
    },
    {
        "id": "stability_ball_russian_twist",
        "name": "Stability Ball Russian Twist",
        "name_pt": "Torção Russa na Bola",
        "category": "Strength",
        "primary_muscles": ["core", "obliques"],
        "secondary_muscles": ["shoulders"],
        "equipment": "stability ball",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/exercise-ball-russian-twist.gif",
        "video_url": "https://www.youtube.com/watch?v=6hZOx-mRbxo",
        "instructions": "Lie with upper back on ball, hips raised, arms extended. Rotate torso side to side keeping hips stable.",
        "instructions_pt": "Deite com a parte superior das costas na bola, quadris elevados, braços estendidos. Gire o tronco de um lado para o outro mantendo os quadris estáveis.",
    },
    {
        "id": "stability_ball_leg_curl",
        "name": "Stability Ball Leg Curl",
        "name_pt": "Leg Curl na Bola de Estabilidade",
        "category": "Strength",
        "primary_muscles": ["hamstrings", "glutes"],
        "secondary_muscles": ["core"],
        "equipment": "stability ball",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/stability-ball-hamstring-curl.gif",
        "video_url": "https://www.youtube.com/watch?v=hAGfBjvIRFE",
        "instructions": "Lie on back, heels on ball, lift hips. Curl ball toward glutes, extend back out keeping hips elevated.",
        "instructions_pt": "Deite de costas, calcanhares na bola, eleve os quadris. Curve a bola em direção aos glúteos, estenda de volta mantendo os quadris elevados.",
    },
    {
        "id": "stability_ball_pushup",
        "name": "Stability Ball Push-Up",
        "name_pt": "Flexão na Bola de Estabilidade",
        "category": "Strength",
        "primary_muscles": ["chest", "triceps"],
        "secondary_muscles": ["shoulders", "core"],
        "equipment": "stability ball",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/11/stability-ball-push-up.gif",
        "video_url": "https://www.youtube.com/watch?v=sS8cLsA2NTQ",
        "instructions": "Place hands on ball in push-up position. Lower chest to ball keeping core tight, push back up.",
        "instructions_pt": "Coloque as mãos na bola em posição de flexão. Baixe o peito até à bola mantendo o core apertado, empurre para cima.",
    },
    {
        "id": "stability_ball_dead_bug",
        "name": "Stability Ball Dead Bug",
        "name_pt": "Dead Bug na Bola",
        "category": "Strength",
        "primary_muscles": ["core"],
        "secondary_muscles": ["hip flexors"],
        "equipment": "stability ball",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/dead-bug.gif",
        "video_url": "https://www.youtube.com/watch?v=4XLEnwUr1d8",
        "instructions": "Lie on back holding ball between hands and knees. Extend opposite arm and leg, return and alternate.",
        "instructions_pt": "Deite de costas segurando a bola entre mãos e joelhos. Estenda braço e perna opostos, retorne e alterne.",
    },
    {
        "id": "stability_ball_rollout",
        "name": "Stability Ball Rollout",
        "name_pt": "Rollout na Bola",
        "category": "Strength",
        "primary_muscles": ["core"],
        "secondary_muscles": ["shoulders", "back"],
        "equipment": "stability ball",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/stability-ball-rollout.gif",
        "video_url": "https://www.youtube.com/watch?v=9VaMuZLofbU",
        "instructions": "Kneel with forearms on ball. Roll ball forward extending arms, engage core to roll back to start.",
        "instructions_pt": "Ajoelhe com os antebraços na bola. Role a bola para frente estendendo os braços, contraia o core para rolar de volta ao início.",
    },
    {
        "id": "stability_ball_back_ext",
        "name": "Stability Ball Back Extension",
        "name_pt": "Extensão de Costas na Bola",
        "category": "Strength",
        "primary_muscles": ["back", "glutes"],
        "secondary_muscles": ["hamstrings", "core"],
        "equipment": "stability ball",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/stability-ball-back-extension.gif",
        "video_url": "https://www.youtube.com/watch?v=w0LpVe-tR0Q",
        "instructions": "Lie face down with hips on ball, feet anchored. Lower torso over ball, raise up squeezing back muscles.",
        "instructions_pt": "Deite de bruços com os quadris na bola, pés ancorados. Baixe o tronco sobre a bola, levante apertando os músculos das costas.",
    },
    {
        "id": "stability_ball_knee_tuck",
        "name": "Stability Ball Knee Tuck",
        "name_pt": "Knee Tuck na Bola",
        "category": "Strength",
        "primary_muscles": ["core", "hip flexors"],
        "secondary_muscles": ["shoulders"],
        "equipment": "stability ball",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/stability-ball-knee-tuck.gif",
        "video_url": "https://www.youtube.com/watch?v=rGaTEJv3T5Q",
        "instructions": "Start in push-up position with shins on ball. Pull knees to chest rolling ball under you, extend back.",
        "instructions_pt": "Comece na posição de flexão com as canelas na bola. Puxe os joelhos ao peito rolando a bola para baixo de você, estenda de volta.",
    },
    {
        "id": "stability_ball_glute_bridge",
        "name": "Stability Ball Glute Bridge",
        "name_pt": "Ponte de Glúteos na Bola",
        "category": "Strength",
        "primary_muscles": ["glutes", "hamstrings"],
        "secondary_muscles": ["core"],
        "equipment": "stability ball",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/stability-ball-hip-thrust.gif",
        "video_url": "https://www.youtube.com/watch?v=9FGg0sU-k-Q",
        "instructions": "Lie on back with heels on ball. Raise hips until body forms straight line, squeeze glutes at top, lower slowly.",
        "instructions_pt": "Deite de costas com os calcanhares na bola. Eleve os quadris até o corpo formar uma linha reta, aperte os glúteos no topo, desça lentamente.",
    },
    {
        "id": "stability_ball_wall_squat",
        "name": "Stability Ball Wall Squat",
        "name_pt": "Agachamento com Bola na Parede",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "glutes"],
        "secondary_muscles": ["hamstrings", "core"],
        "equipment": "stability ball",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/wall-ball-squat.gif",
        "video_url": "https://www.youtube.com/watch?v=I6tQDGYG9BA",
        "instructions": "Place ball between lower back and wall. Squat down rolling ball with you, drive through heels to stand.",
        "instructions_pt": "Coloque a bola entre a parte inferior das costas e a parede. Agache rolando a bola consigo, empurre pelos calcanhares para levantar.",
    },
    {
        "id": "stability_ball_iyt",
        "name": "Stability Ball I-Y-T Raise",
        "name_pt": "Elevação I-Y-T na Bola",
        "category": "Strength",
        "primary_muscles": ["shoulders", "back"],
        "secondary_muscles": ["trapezius", "core"],
        "equipment": "stability ball",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/i-y-t-raises.gif",
        "video_url": "https://www.youtube.com/watch?v=vwNpnMYLPaI",
        "instructions": "Lie face down on ball. Raise arms in I shape (straight ahead), then Y shape (45 degrees), then T shape (out to sides).",
        "instructions_pt": "Deite de bruços na bola. Eleve os braços em forma de I (reto à frente), depois Y (45 graus), depois T (para os lados).",
    },
    {
        "id": "hip_circles",
        "name": "Hip Circles",
        "name_pt": "Mobilidade de quadril (círculos)",
        "category": "Mobility",
        "primary_muscles": ["hips"],
        "secondary_muscles": ["core"],
        "equipment": "bodyweight",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/06/hip-circles.gif",
        "video_url": "https://www.youtube.com/watch?v=QxCOEozHnMs",
        "instructions": "Stand on one leg, make large circles with raised knee, switch sides",
        "instructions_pt": "Fique num pé só, faça círculos grandes com o joelho levantado, troque de lado",
    },
    {
        "id": "ankle_mobility",
        "name": "Ankle Mobility",
        "name_pt": "Mobilidade de tornozelos",
        "category": "Mobility",
        "primary_muscles": ["calves"],
        "secondary_muscles": ["ankles"],
        "equipment": "bodyweight",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/04/ankle-circles.gif",
        "video_url": "https://www.youtube.com/watch?v=tgeVo1luU4Y",
        "instructions": "Rotate ankles in circles, flex and point toes to warm up joints",
        "instructions_pt": "Rode os tornozelos em círculos, flexione e estique os dedos para aquecer as articulações",
    },
    {
        "id": "pause_squat",
        "name": "Pause Squat",
        "name_pt": "Agachamento com pausa no fundo",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "glutes"],
        "secondary_muscles": ["core", "hamstrings"],
        "equipment": "bodyweight",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2023/03/air-squat.gif",
        "video_url": "https://www.youtube.com/watch?v=aclHkVaku9U",
        "instructions": "Squat down, pause for 2-3 seconds at the bottom, then stand up",
        "instructions_pt": "Agache, pause 2-3 segundos no fundo, depois levante",
    },
    {
        "id": "dumbbell_lunge",
        "name": "Dumbbell Lunge",
        "name_pt": "Passada (lunge) com halteres",
        "category": "Strength",
        "primary_muscles": ["quadriceps", "glutes"],
        "secondary_muscles": ["hamstrings", "calves"],
        "equipment": "dumbbells",
        "difficulty": "intermediate",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/walking-lunges.gif",
        "video_url": "https://www.youtube.com/watch?v=D7KaRcUTQeE",
        "instructions": "Hold dumbbells at sides, step forward into lunge, alternate legs",
        "instructions_pt": "Segure halteres nas laterais, dê um passo à frente numa passada, alterne as pernas",
    },
    {
        "id": "hamstring_stretch",
        "name": "Hamstring Stretch",
        "name_pt": "Alongamento de isquiotibiais",
        "category": "Stretching",
        "primary_muscles": ["hamstrings"],
        "secondary_muscles": ["lower back"],
        "equipment": "bodyweight",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/10/standing-hamstring-stretch.gif",
        "video_url": "https://www.youtube.com/watch?v=FDwpEdxZ4H4",
        "instructions": "Extend one leg forward, hinge at hips, reach toward toes, hold 20-30 seconds",
        "instructions_pt": "Estenda uma perna à frente, incline no quadril, alcance os dedos dos pés, segure 20-30 segundos",
    },
    {
        "id": "pigeon_stretch",
        "name": "Pigeon Pose Stretch",
        "name_pt": "Alongamento de glúteos (posição de pombo)",
        "category": "Stretching",
        "primary_muscles": ["glutes"],
        "secondary_muscles": ["hips", "piriformis"],
        "equipment": "bodyweight",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/08/pigeon-pose.gif",
        "video_url": "https://www.youtube.com/watch?v=UKwkChzThig",
        "instructions": "One leg bent in front, other extended back, lean forward and hold",
        "instructions_pt": "Uma perna dobrada à frente, outra estendida atrás, incline para frente e segure",
    },
    {
        "id": "calf_stretch",
        "name": "Calf Stretch",
        "name_pt": "Alongamento de panturrilhas",
        "category": "Stretching",
        "primary_muscles": ["calves"],
        "secondary_muscles": ["achilles"],
        "equipment": "bodyweight",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/09/calf-stretch.gif",
        "video_url": "https://www.youtube.com/watch?v=u_sfQX5JKWQ",
        "instructions": "Step one foot back, press heel to floor, lean forward, hold 20-30 seconds",
        "instructions_pt": "Recue um pé, pressione o calcanhar no chão, incline para frente, segure 20-30 segundos",
    },
    {
        "id": "bicep_wall_stretch",
        "name": "Bicep Wall Stretch",
        "name_pt": "Alongamento de bíceps (mão na parede)",
        "category": "Stretching",
        "primary_muscles": ["biceps"],
        "secondary_muscles": ["shoulders", "chest"],
        "equipment": "bodyweight",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/11/bicep-stretch.gif",
        "video_url": "https://www.youtube.com/watch?v=iME7lnPnWHs",
        "instructions": "Place palm on wall behind you, rotate body away to stretch bicep",
        "instructions_pt": "Coloque a palma na parede atrás de si, rode o corpo para alongar o bíceps",
    },
    {
        "id": "tricep_overhead_stretch",
        "name": "Overhead Tricep Stretch",
        "name_pt": "Alongamento de tríceps acima da cabeça",
        "category": "Stretching",
        "primary_muscles": ["triceps"],
        "secondary_muscles": ["shoulders"],
        "equipment": "bodyweight",
        "difficulty": "beginner",
        "image_url": "https://www.inspireusafoundation.org/wp-content/uploads/2022/03/tricep-stretch.gif",
        "video_url": "https://www.youtube.com/watch?v=4aoUZEZFJF8",
        "instructions": "Raise arm overhead, bend elbow, use other hand to gently push elbow down",
        "instructions_pt": "Levante o braço acima da cabeça, dobre o cotovelo, use a outra mão para empurrar suavemente o cotovelo para baixo",
    },
]
